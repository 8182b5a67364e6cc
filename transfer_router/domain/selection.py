"""Route selection - picks the cheapest, fastest and recommended routes from a batch"""

import logging
import math
from dataclasses import replace
from datetime import datetime
from typing import Sequence
from transfer_router.domain.models import Route, RouteCategory, RoutingResult
from transfer_router.domain.exceptions import EmptyBatchError, InconsistentRouteError
from transfer_router.domain.fees import calculate_total_fees
from transfer_router.domain.reasoning import generate_reasoning
from transfer_router.domain.scoring import score_routes

logger = logging.getLogger(__name__)

# Routes scoring above this are considered high risk
HIGH_RISK_THRESHOLD = 70.0


def _validate_batch(routes: Sequence[Route], category: RouteCategory) -> None:
    """Reject empty batches and routes whose totals disagree with their steps"""
    if not routes:
        raise EmptyBatchError(f"Cannot select {category.value} route from an empty batch")

    for index, route in enumerate(routes):
        step_fees = calculate_total_fees(route.steps)
        if not math.isclose(route.total_fees, step_fees, rel_tol=1e-9, abs_tol=1e-9):
            raise InconsistentRouteError(
                f"Route {index} reports total fees {route.total_fees} but its steps sum to {step_fees}"
            )


def select_cheapest_route(routes: Sequence[Route]) -> Route:
    """
    Return the route with the lowest total fees.

    Ties go to the route that appears first in the batch.

    Raises:
        EmptyBatchError: If no routes are given
        InconsistentRouteError: If a route's total fees don't match its steps
    """
    _validate_batch(routes, RouteCategory.CHEAPEST)

    cheapest = routes[0]
    for route in routes[1:]:
        if route.total_fees < cheapest.total_fees:
            cheapest = route
    return cheapest


def select_fastest_route(routes: Sequence[Route]) -> Route:
    """
    Return the route with the earliest estimated arrival.

    Ties go to the route that appears first in the batch.
    """
    _validate_batch(routes, RouteCategory.FASTEST)

    fastest = routes[0]
    for route in routes[1:]:
        if route.estimated_arrival < fastest.estimated_arrival:
            fastest = route
    return fastest


def select_recommended_route(routes: Sequence[Route], now: datetime) -> Route:
    """
    Return the route with the best weighted score (cost 40%, time 30%, risk 30%).

    Cost and time are normalized across the whole batch before scoring.
    Ties go to the route that appears first in the batch.
    """
    _validate_batch(routes, RouteCategory.RECOMMENDED)

    scores = score_routes(routes, now)
    best_index = 0
    for index, breakdown in enumerate(scores):
        if breakdown.total > scores[best_index].total:
            best_index = index
    return routes[best_index]


def check_all_routes_risky(routes: Sequence[Route], threshold: float = HIGH_RISK_THRESHOLD) -> bool:
    """True if every route's risk score exceeds the threshold (False for no routes)"""
    if not routes:
        return False
    return all(route.risk_score > threshold for route in routes)


def categorize_routes(
    routes: Sequence[Route],
    now: datetime,
    high_risk_threshold: float = HIGH_RISK_THRESHOLD,
) -> RoutingResult:
    """
    Main entry point: select the three routes and explain each pick.

    Returns copies of the selected routes tagged with their category and
    reasoning; the input batch is left untouched. The same route may be
    selected for more than one category.
    """
    cheapest = select_cheapest_route(routes)
    fastest = select_fastest_route(routes)
    recommended = select_recommended_route(routes, now)

    selected = [
        replace(
            route,
            steps=list(route.steps),
            category=category,
            reasoning=generate_reasoning(route, category, routes, now),
        )
        for route, category in (
            (cheapest, RouteCategory.CHEAPEST),
            (fastest, RouteCategory.FASTEST),
            (recommended, RouteCategory.RECOMMENDED),
        )
    ]

    all_routes_risky = check_all_routes_risky(selected, high_risk_threshold)

    logger.debug(
        "Routes categorized",
        extra={"batch_size": len(routes), "all_routes_risky": all_routes_risky},
    )

    return RoutingResult(routes=selected, all_routes_risky=all_routes_risky)
