"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from customer_rewards.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_rewards_calculation(
    request_id: str,
    customer_id: int,
    total_points: int,
    months: int,
    duration_ms: float,
) -> None:
    """Log structured calculation outcome for analysis"""
    logging.info(
        "Rewards calculated",
        extra={
            "request_id": request_id,
            "customer_id": customer_id,
            "step": "rewards_complete",
            "total_points": total_points,
            "months": months,
            "duration_ms": duration_ms,
        },
    )


def log_customer_created(request_id: str, customer_id: int, transaction_count: int) -> None:
    """Log structured customer creation outcome"""
    logging.info(
        "Customer added",
        extra={
            "request_id": request_id,
            "customer_id": customer_id,
            "step": "customer_created",
            "transaction_count": transaction_count,
        },
    )
