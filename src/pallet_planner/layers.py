from __future__ import annotations

from typing import Sequence

from .constants import COORDINATES, GROUPING_PO_ITEM, MAX_BOXES_PER_LAYER
from .models import Carton, Layer, LayerSlot


def display_label(carton: Carton, grouping: str) -> str:
    if grouping == GROUPING_PO_ITEM:
        return f"{carton.po}-{carton.sku}"
    return carton.sku


def label_frequencies(cartons: Sequence[Carton], grouping: str) -> dict[str, tuple[int, str]]:
    """Map label -> (count, sku), in order of first appearance."""
    freq: dict[str, tuple[int, str]] = {}
    for carton in cartons:
        label = display_label(carton, grouping)
        count, _ = freq.get(label, (0, carton.sku))
        freq[label] = (count + 1, carton.sku)
    return freq


def build_layers(cartons: Sequence[Carton], grouping: str) -> list[Layer]:
    """Stack a pallet's cartons into layers of at most six.

    The most common label goes first so it fills whole layers at the
    bottom. Every layer uses the same coordinate order, which keeps slot
    ``i`` of each layer directly above slot ``i`` of the layer beneath.
    """
    freq = label_frequencies(cartons, grouping)
    ordered = sorted(freq.items(), key=lambda item: item[1][0], reverse=True)

    flat: list[tuple[str, str]] = []
    for label, (count, sku) in ordered:
        flat.extend([(label, sku)] * count)

    layers: list[Layer] = []
    for start in range(0, len(flat), MAX_BOXES_PER_LAYER):
        chunk = flat[start : start + MAX_BOXES_PER_LAYER]
        breakdown: dict[str, int] = {}
        mapping: list[LayerSlot] = []
        for coordinate, (label, sku) in zip(COORDINATES, chunk):
            breakdown[label] = breakdown.get(label, 0) + 1
            mapping.append(LayerSlot(coordinate=coordinate, label=label, sku=sku))
        layers.append(Layer(breakdown=breakdown, mapping=mapping))
    return layers
