"""Unit tests for route selection and categorization"""

import pytest
from datetime import timedelta
from transfer_router.domain.models import RouteCategory
from transfer_router.domain.exceptions import EmptyBatchError, InconsistentRouteError
from transfer_router.domain.reasoning import generate_reasoning
from transfer_router.domain.scoring import score_routes
from transfer_router.domain.selection import (
    categorize_routes,
    check_all_routes_risky,
    select_cheapest_route,
    select_fastest_route,
    select_recommended_route,
)


def test_select_cheapest_route(make_route):
    """Test route with lowest total fees wins"""
    routes = [make_route([5.0, 2.0]), make_route([1.5]), make_route([3.0])]

    assert select_cheapest_route(routes) is routes[1]


def test_select_cheapest_route_tie_keeps_first(make_route):
    """Test ties go to the first route in the batch"""
    routes = [make_route([4.0]), make_route([2.0, None]), make_route([1.0, 1.0])]

    assert select_cheapest_route(routes) is routes[1]


def test_select_fastest_route(make_route):
    """Test route with earliest arrival wins"""
    routes = [
        make_route([0.0], arrives_in=timedelta(days=3)),
        make_route([5.0], arrives_in=timedelta(minutes=2)),
        make_route([1.0], arrives_in=timedelta(hours=20)),
    ]

    assert select_fastest_route(routes) is routes[1]


def test_select_fastest_route_tie_keeps_first(make_route):
    routes = [
        make_route([1.0], arrives_in=timedelta(hours=5)),
        make_route([2.0], arrives_in=timedelta(hours=2)),
        make_route([3.0], arrives_in=timedelta(hours=2)),
    ]

    assert select_fastest_route(routes) is routes[1]


def test_select_recommended_route_balances_criteria(make_route, now):
    """Test cheap, quick, safe route beats an expensive slow risky one"""
    routes = [
        make_route([50.0], arrives_in=timedelta(hours=2), risk_score=50),
        make_route([10.0], arrives_in=timedelta(hours=1), risk_score=10),
    ]

    assert select_recommended_route(routes, now) is routes[1]


def test_select_recommended_route_maximizes_score(make_route, now):
    """Test the winner has the highest weighted score in the batch"""
    routes = [
        make_route([0.0], arrives_in=timedelta(days=3), risk_score=40),
        make_route([12.0], arrives_in=timedelta(minutes=10), risk_score=5),
        make_route([3.0], arrives_in=timedelta(hours=24), risk_score=20),
        make_route([6.0], arrives_in=timedelta(hours=6), risk_score=80),
    ]

    scores = [breakdown.total for breakdown in score_routes(routes, now)]
    winner = select_recommended_route(routes, now)

    assert winner is routes[scores.index(max(scores))]


def test_select_recommended_route_tie_keeps_first(make_route, now):
    """Test identical routes resolve to the first one"""
    routes = [make_route([2.0], risk_score=10), make_route([2.0], risk_score=10)]

    assert select_recommended_route(routes, now) is routes[0]


@pytest.mark.parametrize(
    "select",
    [
        select_cheapest_route,
        select_fastest_route,
        lambda routes: select_recommended_route(routes, None),
    ],
    ids=["cheapest", "fastest", "recommended"],
)
def test_selectors_reject_empty_batch(select):
    """Test every selector raises on an empty batch"""
    with pytest.raises(EmptyBatchError):
        select([])


def test_selectors_reject_inconsistent_total_fees(make_route, now):
    """Test total fees must match the sum of step fees"""
    routes = [make_route([1.0]), make_route([2.0, 3.0], total_fees=4.0)]

    with pytest.raises(InconsistentRouteError):
        select_cheapest_route(routes)
    with pytest.raises(InconsistentRouteError):
        select_fastest_route(routes)
    with pytest.raises(InconsistentRouteError):
        select_recommended_route(routes, now)


def test_selectors_tolerate_float_rounding(make_route):
    """Test totals that differ only by float rounding are accepted"""
    routes = [make_route([0.1, 0.2], total_fees=0.3)]

    assert select_cheapest_route(routes) is routes[0]


def test_check_all_routes_risky(make_route):
    """Test warning only when every route scores above 70"""
    assert check_all_routes_risky([make_route([1.0], risk_score=71), make_route([1.0], risk_score=95)]) is True
    assert check_all_routes_risky([make_route([1.0], risk_score=71), make_route([1.0], risk_score=70)]) is False
    assert check_all_routes_risky([]) is False


def test_categorize_routes(make_route, now):
    """Test complete selection flow"""
    routes = [
        make_route([None], arrives_in=timedelta(days=3), risk_score=40),
        make_route([8.0], arrives_in=timedelta(minutes=3), risk_score=20),
        make_route([1.0], arrives_in=timedelta(hours=5), risk_score=5),
    ]

    result = categorize_routes(routes, now)

    cheapest, fastest, recommended = result.routes
    assert cheapest.category is RouteCategory.CHEAPEST
    assert fastest.category is RouteCategory.FASTEST
    assert recommended.category is RouteCategory.RECOMMENDED

    assert cheapest.total_fees == 0
    assert fastest.estimated_arrival == now + timedelta(minutes=3)
    assert recommended.total_fees == 1.0

    assert cheapest.reasoning == generate_reasoning(routes[0], RouteCategory.CHEAPEST, routes, now)
    assert fastest.reasoning == generate_reasoning(routes[1], RouteCategory.FASTEST, routes, now)
    assert recommended.reasoning == generate_reasoning(routes[2], RouteCategory.RECOMMENDED, routes, now)

    assert result.all_routes_risky is False


def test_categorize_routes_leaves_batch_untouched(make_route, now):
    """Test selected routes are copies and inputs keep no category"""
    routes = [make_route([2.0]), make_route([1.0], arrives_in=timedelta(hours=3))]

    result = categorize_routes(routes, now)

    assert all(route.category is None and route.reasoning == "" for route in routes)
    assert all(selected is not original for selected in result.routes for original in routes)
    assert result.routes[0].steps is not routes[1].steps


def test_categorize_routes_same_route_in_every_category(make_route, now):
    """Test a single candidate is cheapest, fastest and recommended"""
    route = make_route([3.0], risk_score=90)

    result = categorize_routes([route], now)

    assert [r.category for r in result.routes] == [
        RouteCategory.CHEAPEST,
        RouteCategory.FASTEST,
        RouteCategory.RECOMMENDED,
    ]
    assert result.all_routes_risky is True


def test_categorize_routes_custom_risk_threshold(make_route, now):
    route = make_route([3.0], risk_score=60)

    assert categorize_routes([route], now, high_risk_threshold=50).all_routes_risky is True


def test_categorize_routes_empty_batch(now):
    with pytest.raises(EmptyBatchError):
        categorize_routes([], now)
