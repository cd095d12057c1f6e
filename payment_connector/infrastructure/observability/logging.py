"""Structured JSON logging for payment service calls"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

logger = logging.getLogger("payment_connector")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "payment-connector", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "payment-connector") -> None:
    """Send the connector's logs to stdout as JSON; applications call this explicitly"""
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_request(verb: str, path: str, status_code: int, duration_ms: float) -> None:
    """Log structured outcome of one payment service request"""
    level = logging.INFO if status_code < 500 else logging.WARNING
    logger.log(
        level,
        "Payment service request completed",
        extra={
            "verb": verb,
            "path": path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )
