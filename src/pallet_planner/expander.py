from __future__ import annotations

import math
from typing import Sequence

from .constants import GROUPING_ITEM, GROUPING_NONE, MAX_CARTONS, MIXED_GROUP_KEY
from .models import Carton, PurchaseOrder
from .validation import InputValidationError, line_context, parse_quantity, parse_units_per_box


def group_key_for(po: str, sku: str, grouping: str) -> str:
    if grouping == GROUPING_NONE:
        return MIXED_GROUP_KEY
    if grouping == GROUPING_ITEM:
        return sku
    return f"{po}-{sku}"


def carton_id(sequence: int) -> str:
    return f"C{sequence:06d}"


def cartons_needed(quantity: float, units_per_box: float) -> int:
    ratio = quantity / units_per_box
    if not math.isfinite(ratio):
        raise OverflowError(f"{quantity!r} / {units_per_box!r} is not a finite carton count")
    return int(math.ceil(ratio))


def _line_counts(orders: Sequence[PurchaseOrder]) -> list[tuple[PurchaseOrder, str, float, int]]:
    counts = []
    for order in orders:
        for index, line in enumerate(order.lines):
            context = line_context(order.po, index)
            quantity = parse_quantity(line.quantity, context=context)
            units_per_box = parse_units_per_box(line.units_per_box, context=context)
            try:
                count = cartons_needed(quantity, units_per_box)
            except OverflowError:
                raise InputValidationError(
                    f"{context}: quantity {line.quantity!r} with units_per_box "
                    f"{line.units_per_box!r} expands to too many cartons",
                    field="quantity",
                    value=line.quantity,
                ) from None
            counts.append((order, line.sku, units_per_box, count))
    return counts


def expand_cartons(
    orders: Sequence[PurchaseOrder],
    grouping: str,
    *,
    max_cartons: int = MAX_CARTONS,
) -> tuple[Carton, ...]:
    """Explode order lines into one ``Carton`` per physical box.

    Every line is validated before any carton is produced, so a bad value
    late in the manifest fails the whole run instead of yielding a partial
    expansion.
    """
    counts = _line_counts(orders)
    total = sum(count for _, _, _, count in counts)
    if total > max_cartons:
        raise InputValidationError(
            f"order manifest expands to {total} cartons, limit is {max_cartons}",
            field="quantity",
            value=total,
        )

    cartons: list[Carton] = []
    for order, sku, units_per_box, count in counts:
        key = group_key_for(order.po, sku, grouping)
        for _ in range(count):
            cartons.append(
                Carton(
                    id=carton_id(len(cartons) + 1),
                    po=order.po,
                    sku=sku,
                    units_per_box=units_per_box,
                    group_key=key,
                )
            )
    return tuple(cartons)
