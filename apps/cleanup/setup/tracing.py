"""OpenTelemetry Distributed Tracing Configuration.

분산 트레이싱 설정 (CLEANUP_OTEL_ENABLED / OTEL_ENABLED):
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Judge 호출)
- Celery 자동 계측 (worker)

Endpoint/Sampling은 표준 OTEL_EXPORTER_OTLP_* 환경변수를 따릅니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from apps.cleanup.setup.config import get_settings

logger = logging.getLogger(__name__)

_tracer_provider = None


def configure_tracing(service_name: str) -> bool:
    """TracerProvider를 설정합니다.

    Returns:
        bool: 설정 여부
    """
    global _tracer_provider

    settings = get_settings()
    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (OTEL_ENABLED=false)")
        return False
    if _tracer_provider is not None:
        return True

    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    resource = Resource.create(
        {
            "service.name": service_name,
            "deployment.environment": settings.environment,
        }
    )
    _tracer_provider = TracerProvider(resource=resource)
    _tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
    trace.set_tracer_provider(_tracer_provider)

    logger.info("OpenTelemetry tracing configured", extra={"service": service_name})
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측."""
    if not get_settings().otel_enabled:
        return

    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
    logger.info("FastAPI instrumentation enabled")


def instrument_httpx() -> None:
    """HTTPX 자동 계측 (Judge 호출 추적)."""
    if not get_settings().otel_enabled:
        return

    from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

    HTTPXClientInstrumentor().instrument()
    logger.info("HTTPX instrumentation enabled")


def instrument_celery() -> None:
    """Celery 자동 계측 (worker)."""
    if not get_settings().otel_enabled:
        return

    from opentelemetry.instrumentation.celery import CeleryInstrumentor

    CeleryInstrumentor().instrument()
    logger.info("Celery instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
        logger.info("OpenTelemetry tracing shutdown complete")
