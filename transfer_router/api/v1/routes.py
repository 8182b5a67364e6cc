"""POST /v1/routes/select and /v1/routes/reasoning - route selection endpoints"""

import time
import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Request

from transfer_router.api.v1.schemas import (
    ReasoningRequest,
    ReasoningResponse,
    SelectedRouteSchema,
    SelectionRequest,
    SelectionResponse,
)
from transfer_router.api.dependencies import get_current_time, get_request_id
from transfer_router.config import settings
from transfer_router.domain.selection import categorize_routes
from transfer_router.domain.reasoning import generate_reasoning
from transfer_router.domain.models import RouteCategory
from transfer_router.domain.exceptions import EmptyBatchError, InconsistentRouteError
from transfer_router.infrastructure.observability.metrics import (
    reasoning_counter,
    record_selection,
    selection_errors_counter,
)
from transfer_router.infrastructure.observability.logging import log_reasoning, log_selection

router = APIRouter()


@router.post("/routes/select", response_model=SelectionResponse)
def select_routes(
    request_body: SelectionRequest,
    request: Request,
    current_time: datetime = Depends(get_current_time),
):
    """
    Pick the cheapest, fastest and recommended routes from a candidate batch.

    Flow:
    1. Convert candidate routes to domain models
    2. Select and explain the three routes
    3. Record metrics and logs
    4. Return the tagged routes with the high-risk warning flag
    """
    start_time = time.time()
    request_id = get_request_id(request)
    now = request_body.current_time or current_time

    try:
        routes = [route.to_domain() for route in request_body.routes]
        result = categorize_routes(routes, now, settings.high_risk_threshold)

    except EmptyBatchError as e:
        selection_errors_counter.labels(error="empty_batch").inc()
        logging.warning(f"Empty batch: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail="No routes found")

    except InconsistentRouteError as e:
        selection_errors_counter.labels(error="inconsistent_route").inc()
        logging.warning(f"Inconsistent route: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_selection(result, len(routes))
    log_selection(request_id, len(routes), result, duration_ms)

    cheapest, fastest, recommended = (SelectedRouteSchema.from_domain(route) for route in result.routes)
    return SelectionResponse(
        cheapest=cheapest,
        fastest=fastest,
        recommended=recommended,
        all_routes_risky=result.all_routes_risky,
    )


@router.post("/routes/reasoning", response_model=ReasoningResponse)
def explain_route(
    request_body: ReasoningRequest,
    request: Request,
    current_time: datetime = Depends(get_current_time),
):
    """
    Explain why a route stands out for a category within its batch.

    Unknown categories and empty batches still get an explanation rather
    than an error.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    now = request_body.current_time or current_time
    category = request_body.category

    try:
        routes = [route.to_domain() for route in request_body.routes]
        reasoning = generate_reasoning(request_body.route.to_domain(), category, routes, now)

    except Exception as e:
        selection_errors_counter.labels(error="reasoning_failed").inc()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if category in [c.value for c in RouteCategory]:
        reasoning_counter.labels(category=category).inc()
    else:
        logging.warning(f"Unknown category: {category}", extra={"request_id": request_id})
        reasoning_counter.labels(category="unknown").inc()

    duration_ms = (time.time() - start_time) * 1000
    log_reasoning(request_id, category, len(routes), duration_ms)

    return ReasoningResponse(category=category, reasoning=reasoning)
