"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TextIO
from pythonjsonlogger import jsonlogger

from awareness_engine.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure structured JSON logging on the root logger"""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)

    # httpx logs every upstream request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def log_awareness_report(
    request_id: str,
    user_id: str,
    score: int,
    label: str,
    insight_types: List[str],
    duration_ms: float,
) -> None:
    """Log structured report outcome for analysis"""
    logging.info(
        "Awareness report completed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "report_complete",
            "clarity_score": score,
            "clarity_label": label,
            "insight_types": insight_types,
            "duration_ms": duration_ms,
        },
    )
