"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from transfer_router.config import settings
from transfer_router.domain.models import RoutingResult


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


def log_selection(
    request_id: str,
    batch_size: int,
    result: RoutingResult,
    duration_ms: float,
) -> None:
    """Log structured selection outcome for analysis"""
    cheapest, fastest, recommended = result.routes
    logging.info(
        "Route selection completed",
        extra={
            "request_id": request_id,
            "step": "selection_complete",
            "batch_size": batch_size,
            "cheapest_fees": cheapest.total_fees,
            "fastest_arrival": fastest.estimated_arrival.isoformat(),
            "recommended_risk_score": recommended.risk_score,
            "all_routes_risky": result.all_routes_risky,
            "duration_ms": duration_ms,
        },
    )


def log_reasoning(request_id: str, category: str, batch_size: int, duration_ms: float) -> None:
    """Log structured reasoning outcome"""
    logging.info(
        "Route reasoning generated",
        extra={
            "request_id": request_id,
            "step": "reasoning_complete",
            "category": category,
            "batch_size": batch_size,
            "duration_ms": duration_ms,
        },
    )
