"""Domain models - pure Python dataclasses representing transfer routes"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class TransferSpeed(str, Enum):
    """Settlement speed of a single transfer"""

    INSTANT = "instant"
    SAME_DAY = "same_day"
    ONE_DAY = "1_day"
    THREE_DAY = "3_day"


class RouteCategory(str, Enum):
    """Category a route is selected for"""

    CHEAPEST = "cheapest"
    FASTEST = "fastest"
    RECOMMENDED = "recommended"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class TransferStep:
    """One hop of a route, moving money between two accounts"""

    from_account_id: str
    to_account_id: str
    amount: float
    method: TransferSpeed
    fee: Optional[float]  # None means free
    estimated_arrival: datetime


@dataclass
class Route:
    """End-to-end candidate route produced by the route generator"""

    steps: List[TransferStep]
    total_fees: float
    estimated_arrival: datetime
    risk_level: RiskLevel
    risk_score: float  # 0-100, lower is better
    category: Optional[RouteCategory] = None
    reasoning: str = ""


@dataclass
class ScoreBreakdown:
    """Weighted components of a route's recommendation score"""

    normalized_cost: float
    normalized_time: float
    cost_component: float
    time_component: float
    risk_component: float
    total: float


@dataclass
class RoutingResult:
    """Output of route categorization"""

    routes: List[Route] = field(default_factory=list)  # cheapest, fastest, recommended
    all_routes_risky: bool = False
