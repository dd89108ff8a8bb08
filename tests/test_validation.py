import pytest

from pallet_planner.models import OrderLine, PurchaseOrder, Settings
from pallet_planner.validation import (
    ConfigurationError,
    InputValidationError,
    PlanningError,
    coerce_orders,
    validate_settings,
)


def test_defaults():
    assert validate_settings(None) == Settings(max_pallet_height=93.0, grouping="po-item")
    assert validate_settings({}) == Settings()


def test_camel_case_settings_accepted():
    settings = validate_settings({"maxPalletHeight": "72", "grouping": "item"})
    assert settings == Settings(max_pallet_height=72.0, grouping="item")


def test_unknown_grouping_rejected():
    with pytest.raises(ConfigurationError) as excinfo:
        validate_settings({"grouping": "by-color"})
    assert excinfo.value.field == "grouping"
    assert excinfo.value.value == "by-color"


@pytest.mark.parametrize("height", ["tall", 0, -10, float("nan")])
def test_bad_height_rejected(height):
    with pytest.raises(InputValidationError) as excinfo:
        validate_settings(Settings(max_pallet_height=height))
    assert excinfo.value.field == "max_pallet_height"


def test_errors_are_value_errors():
    assert issubclass(ConfigurationError, PlanningError)
    assert issubclass(InputValidationError, ValueError)


def test_coerce_orders_from_mappings():
    orders = coerce_orders(
        [
            {"po": "PO1", "skus": [{"sku": "A", "quantity": 100, "unitsPerBox": 25}]},
            {"po": "PO2", "lines": [{"sku": "B", "quantity": "5"}]},
        ]
    )
    assert orders == [
        PurchaseOrder(po="PO1", lines=[OrderLine(sku="A", quantity=100, units_per_box=25)]),
        PurchaseOrder(po="PO2", lines=[OrderLine(sku="B", quantity="5", units_per_box=None)]),
    ]


def test_coerce_orders_rejects_missing_quantity():
    with pytest.raises(InputValidationError) as excinfo:
        coerce_orders([{"po": "PO1", "lines": [{"sku": "A"}]}])
    assert excinfo.value.field == "quantity"
    assert "PO 'PO1' line 1" in str(excinfo.value)


@pytest.mark.parametrize("orders", ["PO1", {"po": "PO1"}, [42]])
def test_coerce_orders_rejects_wrong_shapes(orders):
    with pytest.raises(InputValidationError):
        coerce_orders(orders)
