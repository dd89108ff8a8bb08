from __future__ import annotations

import math
from datetime import datetime, timezone

from .constants import COORDINATES, MAX_BOXES_PER_LAYER
from .models import Pallet, PalletPlan


def iso_utc_now_ms() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _number(value: float):
    return int(value) if float(value).is_integer() else value


def pallet_to_dict(pallet: Pallet) -> dict:
    return {
        "palletNumber": pallet.pallet_number,
        "boxCount": pallet.box_count,
        "layers": pallet.layers,
        "dims": pallet.dims,
        "estimatedHeight": _number(pallet.estimated_height),
        "estimatedWeight": pallet.estimated_weight,
        "layerBreakdown": [dict(breakdown) for breakdown in pallet.layer_breakdown],
        "layerLayout": [
            [{"coordinate": slot.coordinate, "sku": slot.sku, "label": slot.label} for slot in layer]
            for layer in pallet.layer_layout
        ],
    }


def build_plan_json(plan: PalletPlan, *, include_timestamp: bool = True) -> dict:
    """Serialize a plan with the keys the display layers read."""
    payload = {
        "settings": {
            "maxPalletHeight": _number(plan.settings.max_pallet_height),
            "grouping": plan.settings.grouping,
        },
        "capacity": plan.capacity,
        "targets": list(plan.targets),
        "pallets": [pallet_to_dict(pallet) for pallet in plan.pallets],
        "totals": {
            "pallets": plan.totals.pallets,
            "cartons": plan.totals.cartons,
            "weight": plan.totals.weight,
        },
        "summaries": [
            {
                "pallet": summary.pallet,
                "cartons": summary.cartons,
                "dims": summary.dims,
                "weight": summary.weight,
            }
            for summary in plan.summaries
        ],
    }
    if include_timestamp:
        payload["dateModified"] = iso_utc_now_ms()
    return payload


def find_layout_issues(payload: dict) -> list[str]:
    """Check an exported plan for broken stacking invariants.

    Returns human readable messages; an empty list means the payload is
    consistent.
    """
    messages: list[str] = []
    total_boxes = 0
    total_weight = 0
    pallets = payload.get("pallets", [])
    for pallet in pallets:
        number = pallet.get("palletNumber", "?")
        box_count = int(pallet.get("boxCount", 0))
        total_boxes += box_count
        total_weight += pallet.get("estimatedWeight", 0)
        layout = pallet.get("layerLayout", [])
        expected_layers = math.ceil(box_count / MAX_BOXES_PER_LAYER)
        if pallet.get("layers") != expected_layers or len(layout) != expected_layers:
            messages.append(
                f"Pallet {number}: expected {expected_layers} layers, "
                f"got {pallet.get('layers')} ({len(layout)} in layout)"
            )
        placed = 0
        for layer_index, layer in enumerate(layout, start=1):
            coordinates = [slot.get("coordinate") for slot in layer]
            placed += len(coordinates)
            if len(coordinates) > MAX_BOXES_PER_LAYER:
                messages.append(
                    f"Pallet {number} layer {layer_index}: {len(coordinates)} boxes"
                )
            if coordinates != list(COORDINATES[: len(coordinates)]):
                messages.append(
                    f"Pallet {number} layer {layer_index}: coordinates {coordinates} "
                    "break the stacking order"
                )
        if placed != box_count:
            messages.append(f"Pallet {number}: {placed} boxes placed, boxCount is {box_count}")

    totals = payload.get("totals", {})
    if totals.get("pallets", len(pallets)) != len(pallets):
        messages.append(f"Totals: {totals.get('pallets')} pallets, {len(pallets)} listed")
    if totals.get("cartons", total_boxes) != total_boxes:
        messages.append(f"Totals: {totals.get('cartons')} cartons, pallets hold {total_boxes}")
    if totals.get("weight", total_weight) != total_weight:
        messages.append(f"Totals: weight {totals.get('weight')}, pallets sum to {total_weight}")
    return messages
