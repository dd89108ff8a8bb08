from __future__ import annotations

import math

from .constants import MAX_BOXES_PER_LAYER


def compute_pallet_count(total_cartons: int, capacity: int) -> int:
    if total_cartons <= 0:
        return 0
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return int(math.ceil(total_cartons / capacity))


def allocate_targets(total_cartons: int, capacity: int) -> list[int]:
    """Even per-pallet carton targets, preferring whole layers.

    Every pallet starts from the same multiple of a layer (never less than
    one layer). The difference to ``total_cartons`` is then settled from the
    last pallet backward, at most one layer per pallet, so earlier pallets
    keep full layers and the targets sum to exactly ``total_cartons``.
    """
    pallet_count = compute_pallet_count(total_cartons, capacity)
    if pallet_count == 0:
        return []

    base = (total_cartons // pallet_count // MAX_BOXES_PER_LAYER) * MAX_BOXES_PER_LAYER
    base = max(base, MAX_BOXES_PER_LAYER)
    targets = [base] * pallet_count

    leftover = total_cartons - base * pallet_count
    for i in range(pallet_count - 1, -1, -1):
        if leftover == 0:
            break
        if leftover > 0:
            add = min(leftover, MAX_BOXES_PER_LAYER)
            targets[i] += add
            leftover -= add
        else:
            remove = min(-leftover, targets[i])
            targets[i] -= remove
            leftover += remove

    if sum(targets) != total_cartons or max(targets) > capacity:
        raise ValueError(
            f"targets {targets} do not fit {total_cartons} cartons at capacity {capacity}"
        )
    return targets
