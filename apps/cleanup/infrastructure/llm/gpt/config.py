"""OpenAI 공통 설정.

타임아웃, 연결 제한, 재시도 설정 등.
"""

import httpx

# ==========================================
# HTTP 타임아웃 설정
# ==========================================

DEFAULT_TIMEOUT_SECONDS = 30.0


def build_timeout(total_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> httpx.Timeout:
    """읽기 타임아웃을 Judge 호출 한도에 맞춥니다."""
    return httpx.Timeout(
        connect=5.0,
        read=total_seconds,
        write=10.0,
        pool=5.0,
    )


# ==========================================
# HTTP 연결 제한 설정
# ==========================================

OPENAI_LIMITS = httpx.Limits(
    max_connections=20,
    max_keepalive_connections=5,
    keepalive_expiry=30.0,
)

# ==========================================
# OpenAI 클라이언트 공통 설정
# ==========================================

# 재시도는 이벤트 재전달로 처리 (클라이언트 내부 재시도 없음)
MAX_RETRIES = 0

JUDGE_MAX_TOKENS = 300
