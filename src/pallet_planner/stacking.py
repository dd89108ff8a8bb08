from __future__ import annotations

from .constants import BOX_HEIGHT, MAX_BOXES_PER_LAYER, PALLET_DECK_HEIGHT
from .validation import ConfigurationError


def compute_num_layers(
    max_pallet_height: float,
    box_h: float = BOX_HEIGHT,
    deck_h: float = PALLET_DECK_HEIGHT,
) -> int:
    if box_h <= 0 or max_pallet_height <= 0:
        return 0
    available = max(max_pallet_height - deck_h, 0)
    return max(int(available // box_h), 0)


def compute_max_stack(
    num_layers: int,
    box_h: float = BOX_HEIGHT,
    deck_h: float = PALLET_DECK_HEIGHT,
) -> float:
    if box_h <= 0 or num_layers <= 0:
        return 0
    return num_layers * box_h + deck_h


def compute_capacity(max_pallet_height: float) -> int:
    """Most cartons one pallet can hold under ``max_pallet_height``."""
    layers = compute_num_layers(max_pallet_height)
    if layers <= 0:
        minimum = compute_max_stack(1)
        raise ConfigurationError(
            f"max_pallet_height {max_pallet_height:g} leaves no room for a layer; "
            f"at least {minimum:g} is required",
            field="max_pallet_height",
            value=max_pallet_height,
        )
    return layers * MAX_BOXES_PER_LAYER
