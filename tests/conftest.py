"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional
from fastapi.testclient import TestClient
from transfer_router.api.main import create_app
from transfer_router.domain.fees import calculate_total_fees
from transfer_router.domain.models import RiskLevel, Route, TransferSpeed, TransferStep


NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time so delays are deterministic"""
    return NOW


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def make_route(now: datetime) -> Callable[..., Route]:
    """
    Build a route from its step fees and delivery delay.

    Each fee becomes one step from acct_0 -> acct_1 -> ... that lands at
    now + arrives_in. total_fees defaults to the sum of the step fees.
    """

    def _make_route(
        fees: List[Optional[float]],
        arrives_in: timedelta = timedelta(hours=1),
        risk_score: float = 0.0,
        total_fees: Optional[float] = None,
        method: TransferSpeed = TransferSpeed.INSTANT,
    ) -> Route:
        arrival = now + arrives_in
        steps = [
            TransferStep(
                from_account_id=f"acct_{i}",
                to_account_id=f"acct_{i + 1}",
                amount=100.0,
                method=method,
                fee=fee,
                estimated_arrival=arrival,
            )
            for i, fee in enumerate(fees)
        ]
        return Route(
            steps=steps,
            total_fees=calculate_total_fees(steps) if total_fees is None else total_fees,
            estimated_arrival=arrival,
            risk_level=RiskLevel.LOW if risk_score <= 30 else RiskLevel.HIGH,
            risk_score=risk_score,
        )

    return _make_route
