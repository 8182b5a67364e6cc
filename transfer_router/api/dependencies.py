"""Dependency injection for FastAPI endpoints"""

from datetime import datetime, timezone
from fastapi import Request


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_current_time() -> datetime:
    """Provide the reference time for requests that don't supply one"""
    return datetime.now(timezone.utc)
