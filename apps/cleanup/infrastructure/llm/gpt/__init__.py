"""GPT adapters."""

from apps.cleanup.infrastructure.llm.gpt.judge import GPTVerificationJudge, JudgeOutput

__all__ = ["GPTVerificationJudge", "JudgeOutput"]
