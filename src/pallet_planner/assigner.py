"""Greedy assignment of carton groups onto pallets.

Packing groups into a fixed set of bins while keeping each group whole is
NP-hard in general. The heuristic here is intentionally simple: largest
groups first, each placed whole on the first pallet with room for it, and
split round-robin across pallets only when no single pallet has room. It
does not search for an optimal arrangement.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .models import Carton

logger = logging.getLogger(__name__)

CartonGroup = tuple[Carton, ...]


def group_cartons(cartons: Sequence[Carton]) -> list[CartonGroup]:
    """Group cartons by ``group_key``, largest group first.

    Cartons keep their original order inside a group and equal-sized groups
    keep the order in which their key was first seen.
    """
    groups: dict[str, list[Carton]] = {}
    for carton in cartons:
        groups.setdefault(carton.group_key, []).append(carton)
    ordered = sorted(groups.values(), key=len, reverse=True)
    return [tuple(group) for group in ordered]


def _first_fit(sizes: Sequence[int], targets: Sequence[int], group_size: int) -> int:
    for index, (size, target) in enumerate(zip(sizes, targets)):
        if size + group_size <= target:
            return index
    return -1


def _split(
    group: CartonGroup, sizes: Sequence[int], targets: Sequence[int]
) -> list[tuple[int, CartonGroup]]:
    """Fill remaining target room pallet by pallet, starting at the first."""
    free = sum(target - size for size, target in zip(sizes, targets))
    if free < len(group):
        raise ValueError(
            f"group {group[0].group_key!r} needs {len(group)} slots, "
            f"only {free} remain across all pallets"
        )
    pieces: list[tuple[int, CartonGroup]] = []
    remaining = group
    index = 0
    while remaining:
        slot = index % len(targets)
        room = targets[slot] - sizes[slot]
        if room > 0:
            pieces.append((slot, remaining[:room]))
            remaining = remaining[room:]
        index += 1
    return pieces


def assign_groups(
    groups: Sequence[CartonGroup], targets: Sequence[int]
) -> list[tuple[Carton, ...]]:
    """Return one carton tuple per pallet; no pallet exceeds its target."""
    pallets: list[tuple[Carton, ...]] = [() for _ in targets]
    if not targets:
        if any(groups):
            raise ValueError("cartons to place but no pallets were allocated")
        return pallets

    for group in groups:
        if not group:
            continue
        sizes = [len(pallet) for pallet in pallets]
        index = _first_fit(sizes, targets, len(group))
        if index >= 0:
            pallets[index] = pallets[index] + group
            continue

        pieces = _split(group, sizes, targets)
        logger.debug(
            "Split group %r (%d cartons) across pallets %s",
            group[0].group_key,
            len(group),
            [slot + 1 for slot, _ in pieces],
        )
        for slot, piece in pieces:
            pallets[slot] = pallets[slot] + piece
    return pallets
