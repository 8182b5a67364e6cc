"""Pydantic schemas for API request/response validation"""

from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from transfer_router.domain.models import RiskLevel, Route, RouteCategory, TransferSpeed, TransferStep


def _assume_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps as UTC so they compare with aware ones"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TransferStepSchema(BaseModel):
    """Single hop of a candidate route"""

    from_account_id: str = Field(..., min_length=1)
    to_account_id: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0, description="Amount moved on this step in dollars")
    method: TransferSpeed
    fee: Optional[float] = Field(None, ge=0, description="Step fee in dollars, null if free")
    estimated_arrival: datetime

    @field_validator("estimated_arrival")
    @classmethod
    def arrival_as_utc(cls, value: datetime) -> datetime:
        return _assume_utc(value)

    def to_domain(self) -> TransferStep:
        return TransferStep(
            from_account_id=self.from_account_id,
            to_account_id=self.to_account_id,
            amount=self.amount,
            method=self.method,
            fee=self.fee,
            estimated_arrival=self.estimated_arrival,
        )


class RouteSchema(BaseModel):
    """Candidate route as produced by the route generator"""

    steps: List[TransferStepSchema] = Field(..., min_length=1)
    total_fees: float = Field(..., ge=0, description="Sum of step fees in dollars")
    estimated_arrival: datetime
    risk_level: RiskLevel
    risk_score: float = Field(..., ge=0, le=100, description="0-100, lower is safer")

    @field_validator("estimated_arrival")
    @classmethod
    def arrival_as_utc(cls, value: datetime) -> datetime:
        return _assume_utc(value)

    def to_domain(self) -> Route:
        return Route(
            steps=[step.to_domain() for step in self.steps],
            total_fees=self.total_fees,
            estimated_arrival=self.estimated_arrival,
            risk_level=self.risk_level,
            risk_score=self.risk_score,
        )


class SelectionRequest(BaseModel):
    """Request body for POST /v1/routes/select"""

    routes: List[RouteSchema]
    current_time: Optional[datetime] = Field(None, description="Reference time, defaults to server time")

    @field_validator("current_time")
    @classmethod
    def current_time_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _assume_utc(value)


class SelectedRouteSchema(RouteSchema):
    """Route tagged with the category it was selected for"""

    category: RouteCategory
    reasoning: str

    @classmethod
    def from_domain(cls, route: Route) -> "SelectedRouteSchema":
        return cls(
            steps=[
                TransferStepSchema(
                    from_account_id=step.from_account_id,
                    to_account_id=step.to_account_id,
                    amount=step.amount,
                    method=step.method,
                    fee=step.fee,
                    estimated_arrival=step.estimated_arrival,
                )
                for step in route.steps
            ],
            total_fees=route.total_fees,
            estimated_arrival=route.estimated_arrival,
            risk_level=route.risk_level,
            risk_score=route.risk_score,
            category=route.category,
            reasoning=route.reasoning,
        )


class SelectionResponse(BaseModel):
    """Response for POST /v1/routes/select"""

    cheapest: SelectedRouteSchema
    fastest: SelectedRouteSchema
    recommended: SelectedRouteSchema
    all_routes_risky: bool = False


class ReasoningRequest(BaseModel):
    """Request body for POST /v1/routes/reasoning"""

    route: RouteSchema
    category: str = Field(..., description="cheapest | fastest | recommended")
    routes: List[RouteSchema]
    current_time: Optional[datetime] = None

    @field_validator("current_time")
    @classmethod
    def current_time_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _assume_utc(value)


class ReasoningResponse(BaseModel):
    """Response for POST /v1/routes/reasoning"""

    category: str
    reasoning: str
