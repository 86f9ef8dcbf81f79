"""OpenTelemetry Tracing - Bins Service.

BINS_OTEL_ENABLED=true 일 때만 설정됩니다.
계측 패키지를 불러올 수 없으면 경고만 남기고 트레이싱 없이 동작합니다.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_tracer_provider: Any = None


def setup_tracing(
    service_name: str,
    endpoint: str,
    sampling_rate: float = 1.0,
    environment: str = "development",
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC 수집기 주소
        sampling_rate: 샘플링 비율 (0.0 ~ 1.0)
        environment: 배포 환경

    Returns:
        설정 성공 여부
    """
    global _tracer_provider  # noqa: PLW0603
    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False

    resource = Resource.create(
        {
            "service.name": service_name,
            "deployment.environment": environment,
        }
    )
    provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=endpoint, insecure=True),
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(
        "OpenTelemetry tracing configured",
        extra={"service": service_name, "endpoint": endpoint, "sampling_rate": sampling_rate},
    )
    return True


def instrument_fastapi(app) -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
        return

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
    logger.info("FastAPI instrumentation enabled")


def instrument_sqlalchemy(engine) -> None:
    """SQLAlchemy 자동 계측 (쿼리 span)."""
    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
    except ImportError:
        logger.warning("SQLAlchemyInstrumentor not available")
        return

    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    logger.info("SQLAlchemy instrumentation enabled")


def instrument_redis() -> None:
    """Redis 자동 계측 (rate limit 추적)."""
    try:
        from opentelemetry.instrumentation.redis import RedisInstrumentor
    except ImportError:
        logger.warning("RedisInstrumentor not available")
        return

    RedisInstrumentor().instrument()
    logger.info("Redis instrumentation enabled")


def shutdown_tracing() -> None:
    """남은 span을 내보내고 트레이싱을 종료합니다."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
