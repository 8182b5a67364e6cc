"""Recommendation scoring engine - weighted cost, time and risk evaluation"""

from datetime import datetime
from typing import List, Sequence
from transfer_router.domain.models import Route, ScoreBreakdown
from transfer_router.domain.normalization import normalize_costs, normalize_times

# Fixed weighting of the recommendation score
COST_WEIGHT = 0.4
TIME_WEIGHT = 0.3
RISK_WEIGHT = 0.3


def calculate_recommended_score(route: Route, normalized_cost: float, normalized_time: float) -> float:
    """
    Calculate the recommendation score for a route (higher is better).

    Scoring weights:
    - 40%: Cost (100 - normalized cost)
    - 30%: Time (100 - normalized time)
    - 30%: Risk (100 - risk score)

    The result lies in 0-100 as long as normalized time does; negative
    delays can push it outside that range.
    """
    return breakdown_score(route, normalized_cost, normalized_time).total


def breakdown_score(route: Route, normalized_cost: float, normalized_time: float) -> ScoreBreakdown:
    """Calculate each weighted component of the recommendation score"""
    cost_component = (100 - normalized_cost) * COST_WEIGHT
    time_component = (100 - normalized_time) * TIME_WEIGHT
    risk_component = (100 - route.risk_score) * RISK_WEIGHT

    return ScoreBreakdown(
        normalized_cost=normalized_cost,
        normalized_time=normalized_time,
        cost_component=cost_component,
        time_component=time_component,
        risk_component=risk_component,
        total=cost_component + time_component + risk_component,
    )


def score_routes(routes: Sequence[Route], now: datetime) -> List[ScoreBreakdown]:
    """
    Normalize the batch once and score every route.

    Returns one breakdown per route, in batch order. This is the only path
    to a recommendation score, so selection and its explanation always agree.
    """
    normalized_costs = normalize_costs(routes)
    normalized_times = normalize_times(routes, now)

    return [
        breakdown_score(route, normalized_costs[index], normalized_times[index])
        for index, route in enumerate(routes)
    ]
