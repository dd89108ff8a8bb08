from pallet_planner.metrics import (
    carton_weight,
    estimate_height,
    estimate_weight,
    format_dims,
)
from pallet_planner.models import Carton


def _carton(units_per_box):
    return Carton(id="C1", po="", sku="A", units_per_box=units_per_box, group_key="A")


def test_reference_box_weight_scales_with_units():
    assert carton_weight(50) == 14.5
    assert carton_weight(25) == 7.25


def test_weight_includes_dead_weight_and_rounds():
    assert estimate_weight([_carton(50)] * 6) == 122
    assert estimate_weight([_carton(25)]) == 42
    assert estimate_weight([]) == 35


def test_weight_rounds_half_up():
    assert estimate_weight([_carton(50)]) == 50


def test_height_and_dims():
    assert estimate_height(1) == 20
    assert estimate_height(3) == 48
    assert format_dims(estimate_height(3)) == "40x48x48"
