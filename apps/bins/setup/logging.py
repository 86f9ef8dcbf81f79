"""Logging Setup.

log_format이 json이면 ECS 포맷으로 출력하여 ``extra`` 필드를 보존합니다.
text 포맷은 로컬 개발용입니다.
"""

from __future__ import annotations

import logging
import sys

import ecs_logging

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_formatter(log_format: str) -> logging.Formatter:
    """log_format에 맞는 Formatter를 반환합니다."""
    if log_format.lower() == "json":
        return ecs_logging.StdlibFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    *,
    service_name: str | None = None,
    environment: str | None = None,
) -> None:
    """루트 로거를 설정합니다."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(log_format))
    root_logger.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    if service_name is None:
        return

    # 서비스 메타데이터
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.service = service_name
        record.environment = environment
        return record

    logging.setLogRecordFactory(record_factory)
