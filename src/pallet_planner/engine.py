from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from .assigner import assign_groups, group_cartons
from .expander import expand_cartons
from .layers import build_layers
from .metrics import estimate_height, estimate_weight, format_dims
from .models import Carton, Pallet, PalletPlan, PlanTotals, Settings
from .stacking import compute_capacity
from .targets import allocate_targets
from .validation import coerce_orders, validate_settings

logger = logging.getLogger(__name__)


def build_pallet(number: int, cartons: Sequence[Carton], grouping: str) -> Pallet:
    layers = build_layers(cartons, grouping)
    height = estimate_height(len(layers))
    return Pallet(
        pallet_number=number,
        box_count=len(cartons),
        layers=len(layers),
        estimated_height=height,
        estimated_weight=estimate_weight(cartons),
        dims=format_dims(height),
        layer_breakdown=[dict(layer.breakdown) for layer in layers],
        layer_layout=[list(layer.mapping) for layer in layers],
        cartons=tuple(cartons),
    )


def summarize(pallets: Sequence[Pallet]) -> PlanTotals:
    return PlanTotals(
        pallets=len(pallets),
        cartons=sum(pallet.box_count for pallet in pallets),
        weight=sum(pallet.estimated_weight for pallet in pallets),
    )


def plan_pallets(
    orders: Iterable[Any] | None,
    settings: Settings | Mapping[str, Any] | None = None,
) -> PalletPlan:
    """Plan how the cartons of ``orders`` are stacked onto pallets.

    Settings are checked before the orders are looked at, so a bad height
    or grouping is reported even for an empty manifest. Returns an empty
    plan when the orders expand to no cartons.
    """
    config = validate_settings(settings)
    capacity = compute_capacity(config.max_pallet_height)

    cartons = expand_cartons(coerce_orders(orders), config.grouping)
    if not cartons:
        logger.debug("No cartons to plan")
        return PalletPlan.empty(config, capacity=capacity)

    targets = allocate_targets(len(cartons), capacity)
    logger.debug(
        "Planning %d cartons: capacity=%d pallets=%d targets=%s",
        len(cartons),
        capacity,
        len(targets),
        targets,
    )

    assigned = assign_groups(group_cartons(cartons), targets)
    pallets: list[Pallet] = [
        build_pallet(index + 1, pallet_cartons, config.grouping)
        for index, pallet_cartons in enumerate(assigned)
    ]
    return PalletPlan(
        pallets=pallets,
        totals=summarize(pallets),
        settings=config,
        capacity=capacity,
        targets=list(targets),
    )
