"""Natural-language explanations for route selections"""

from datetime import datetime
from typing import Optional, Sequence, Union
from transfer_router.domain.models import Route, RouteCategory, ScoreBreakdown
from transfer_router.domain.scoring import (
    COST_WEIGHT,
    RISK_WEIGHT,
    TIME_WEIGHT,
    breakdown_score,
    score_routes,
)
from transfer_router.utils.time_utils import pluralize, split_hours_minutes, whole_hours

# Minimum weighted component that counts as a strength of a recommended route
COST_STRENGTH_THRESHOLD = 30
TIME_STRENGTH_THRESHOLD = 20
RISK_STRENGTH_THRESHOLD = 20

UNKNOWN_CATEGORY_REASONING = "Selected for unknown category"


def generate_reasoning(
    route: Route,
    category: Union[RouteCategory, str],
    routes: Sequence[Route],
    now: datetime,
) -> str:
    """
    Explain why a route was selected for its category.

    Args:
        route: The selected route
        category: Category it was selected for
        routes: Full batch the route was selected from, for comparisons
        now: Reference time used for delays

    Returns:
        Human-readable explanation. Unknown categories get a generic
        string instead of an error.
    """
    try:
        category = RouteCategory(category)
    except ValueError:
        return UNKNOWN_CATEGORY_REASONING

    if category is RouteCategory.CHEAPEST:
        return _cheapest_reasoning(route, routes)
    elif category is RouteCategory.FASTEST:
        return _fastest_reasoning(route, routes, now)
    else:
        return _recommended_reasoning(route, routes, now)


def _cheapest_reasoning(route: Route, routes: Sequence[Route]) -> str:
    total_fees = route.total_fees
    step_count = len(route.steps)

    if total_fees == 0:
        return (
            "This route has zero fees, making it the most cost-effective option "
            f"with {pluralize(step_count, 'transfer step')}."
        )

    savings = max((r.total_fees for r in routes), default=total_fees) - total_fees

    if savings == 0:
        return f"This route costs ${total_fees:.2f} in fees across {pluralize(step_count, 'step')}."

    return (
        f"This route minimizes costs at ${total_fees:.2f} in total fees, "
        f"saving ${savings:.2f} compared to the most expensive option."
    )


def _describe_arrival(route: Route, now: datetime) -> str:
    """'within minutes', 'in 40 minutes', 'in 3 hours', 'in 2 days'"""
    hours, minutes = split_hours_minutes(route.estimated_arrival - now)

    if hours == 0 and minutes <= 5:
        return "within minutes"
    elif hours == 0:
        return f"in {minutes} minutes"
    elif hours < 24:
        return f"in {pluralize(hours, 'hour')}"
    else:
        return f"in {pluralize(hours // 24, 'day')}"


def _fastest_reasoning(route: Route, routes: Sequence[Route], now: datetime) -> str:
    arrival = _describe_arrival(route, now)

    slowest_arrival = max((r.estimated_arrival for r in routes), default=route.estimated_arrival)
    time_saved = slowest_arrival - route.estimated_arrival
    hours_saved = whole_hours(time_saved)

    if not time_saved:
        return f"This route arrives {arrival}, matching the fastest possible delivery time."

    if hours_saved < 1:
        return f"This route arrives {arrival}, the fastest option available."

    days_saved = hours_saved // 24
    if days_saved > 0:
        return f"This route arrives {arrival}, {pluralize(days_saved, 'day')} faster than the slowest option."

    return f"This route arrives {arrival}, {pluralize(hours_saved, 'hour')} faster than the slowest option."


def _same_route(a: Route, b: Route) -> bool:
    """Compare the fields a route carries before selection, ignoring category and reasoning"""
    return (
        a.steps == b.steps
        and a.total_fees == b.total_fees
        and a.estimated_arrival == b.estimated_arrival
        and a.risk_level == b.risk_level
        and a.risk_score == b.risk_score
    )


def _find_breakdown(route: Route, routes: Sequence[Route], now: datetime) -> ScoreBreakdown:
    """
    Score the batch and pick out the breakdown belonging to route.

    The route is matched by identity first, then by its generator-supplied
    fields, so a categorized copy still finds its original in the batch.
    """
    index: Optional[int] = next((i for i, r in enumerate(routes) if r is route), None)
    if index is None:
        index = next((i for i, r in enumerate(routes) if _same_route(r, route)), None)

    if index is None:
        # Not part of the batch: nothing to normalize against
        return breakdown_score(route, 0.0, 0.0)

    return score_routes(routes, now)[index]


def describe_strengths(breakdown: ScoreBreakdown) -> str:
    """List the weighted components that stand out, or 'balanced characteristics'"""
    strengths = []

    if breakdown.cost_component >= COST_STRENGTH_THRESHOLD:
        strengths.append("competitive fees")
    if breakdown.time_component >= TIME_STRENGTH_THRESHOLD:
        strengths.append("fast delivery")
    if breakdown.risk_component >= RISK_STRENGTH_THRESHOLD:
        strengths.append("low risk")

    return ", ".join(strengths) if strengths else "balanced characteristics"


def _recommended_reasoning(route: Route, routes: Sequence[Route], now: datetime) -> str:
    breakdown = _find_breakdown(route, routes, now)

    return (
        f"This route offers the best overall balance with {describe_strengths(breakdown)}. "
        f"It scores {breakdown.total:.1f}/100 on our weighted evaluation "
        f"(cost {COST_WEIGHT:.0%}, speed {TIME_WEIGHT:.0%}, risk {RISK_WEIGHT:.0%})."
    )
