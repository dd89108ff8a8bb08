from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .constants import (
    BOX_HEIGHT,
    DEAD_WEIGHT,
    DEFAULT_UNITS_PER_BOX,
    FOOTPRINT,
    PALLET_DECK_HEIGHT,
    REFERENCE_BOX_WEIGHT,
)
from .models import Carton
from .units import format_inches


def carton_weight(units_per_box: float) -> float:
    """Reference box weight scaled linearly by units per box."""
    return (units_per_box / DEFAULT_UNITS_PER_BOX) * REFERENCE_BOX_WEIGHT


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def estimate_weight(cartons: Iterable[Carton]) -> int:
    total = DEAD_WEIGHT + sum(carton_weight(carton.units_per_box) for carton in cartons)
    return _round_half_up(total)


def estimate_height(layer_count: int) -> float:
    return PALLET_DECK_HEIGHT + layer_count * BOX_HEIGHT


def format_dims(height: float) -> str:
    width, length = FOOTPRINT
    return f"{width}x{length}x{format_inches(height)}"
