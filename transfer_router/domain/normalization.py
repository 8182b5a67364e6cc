"""Batch-relative normalization of route cost and delivery time"""

from datetime import datetime
from typing import Dict, Sequence
from transfer_router.domain.models import Route
from transfer_router.utils.time_utils import delay_seconds


def normalize_costs(routes: Sequence[Route]) -> Dict[int, float]:
    """
    Express each route's total fees as a percentage of the most expensive route.

    Keys are positions in the batch. The most expensive route maps to 100.
    If every route is free, all routes map to 0.
    """
    if not routes:
        return {}

    max_fees = max(route.total_fees for route in routes)

    if max_fees == 0:
        return {index: 0.0 for index in range(len(routes))}

    return {index: (route.total_fees / max_fees) * 100 for index, route in enumerate(routes)}


def normalize_times(routes: Sequence[Route], now: datetime) -> Dict[int, float]:
    """
    Express each route's delay from now as a percentage of the longest delay.

    Keys are positions in the batch. Delays are not clamped: a route arriving
    before now has a negative delay and can normalize outside 0-100.
    If every route arrives exactly at now, all routes map to 0.
    """
    if not routes:
        return {}

    delays = [delay_seconds(route.estimated_arrival, now) for route in routes]
    max_delay = max(delays)

    if max_delay == 0:
        return {index: 0.0 for index in range(len(routes))}

    return {index: (delay / max_delay) * 100 for index, delay in enumerate(delays)}
