"""Fee aggregation for transfer routes"""

from typing import Sequence
from transfer_router.domain.models import TransferStep


def calculate_total_fees(steps: Sequence[TransferStep]) -> float:
    """
    Sum the fees of all steps in a route.

    Steps without a fee (None) are free and count as 0.
    An empty step sequence costs 0.
    """
    return sum((step.fee or 0.0 for step in steps), 0.0)
