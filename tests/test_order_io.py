import json

import pytest

from pallet_planner import order_io
from pallet_planner.models import OrderLine, PurchaseOrder
from pallet_planner.validation import InputValidationError


def test_write_plan_creates_parent_dirs(tmp_path):
    target = tmp_path / "out" / "week42.json"
    payload = {"totals": {"pallets": 1}}

    path = order_io.write_plan(target, payload)

    assert path == str(target)
    assert json.loads(target.read_text(encoding="utf-8")) == payload


def test_load_orders_list(tmp_path):
    path = tmp_path / "orders.json"
    path.write_text(
        json.dumps([{"po": "PO1", "skus": [{"sku": "A", "quantity": 300, "unitsPerBox": 50}]}]),
        encoding="utf-8",
    )

    assert order_io.load_orders(path) == [
        PurchaseOrder(po="PO1", lines=[OrderLine(sku="A", quantity=300, units_per_box=50)])
    ]


def test_load_manifest_with_settings(tmp_path):
    path = tmp_path / "manifest.json"
    path.write_text(
        json.dumps(
            {
                "settings": {"maxPalletHeight": 60, "grouping": "item"},
                "orders": [{"po": "", "lines": [{"sku": "A", "quantity": 10}]}],
            }
        ),
        encoding="utf-8",
    )

    orders, settings = order_io.load_manifest(path)

    assert settings == {"maxPalletHeight": 60, "grouping": "item"}
    assert orders[0].lines[0].sku == "A"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        order_io.load_orders(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InputValidationError):
        order_io.load_orders(path)


def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"po": "\xff\xfe"}]')
    with pytest.raises(InputValidationError) as excinfo:
        order_io.load_manifest(path)
    assert excinfo.value.field == "orders"


def test_directory_instead_of_file(tmp_path):
    with pytest.raises(InputValidationError) as excinfo:
        order_io.load_manifest(tmp_path)
    assert excinfo.value.value == str(tmp_path)
