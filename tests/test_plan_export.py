import json
import re

from pallet_planner import plan_pallets
from pallet_planner.plan_export import build_plan_json, find_layout_issues, iso_utc_now_ms

ORDERS = [
    {"po": "PO1", "lines": [{"sku": "A", "quantity": 700}, {"sku": "B", "quantity": 120, "unitsPerBox": 20}]}
]


def test_iso_format():
    value = iso_utc_now_ms()
    assert value.endswith("Z")
    assert re.match(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", value)


def test_pallet_keys_match_display_layer():
    data = build_plan_json(plan_pallets(ORDERS, {"grouping": "item"}))
    assert list(data["pallets"][0].keys()) == [
        "palletNumber",
        "boxCount",
        "layers",
        "dims",
        "estimatedHeight",
        "estimatedWeight",
        "layerBreakdown",
        "layerLayout",
    ]
    assert data["settings"] == {"maxPalletHeight": 93, "grouping": "item"}
    assert data["pallets"][0]["layerLayout"][0][0] == {
        "coordinate": "a1",
        "sku": "A",
        "label": "A",
    }
    assert "dateModified" in data
    json.dumps(data)


def test_totals_and_summaries():
    plan = plan_pallets(ORDERS)
    data = build_plan_json(plan, include_timestamp=False)
    assert "dateModified" not in data
    assert data["totals"] == {
        "pallets": plan.totals.pallets,
        "cartons": 20,
        "weight": plan.totals.weight,
    }
    assert data["summaries"][0] == {
        "pallet": 1,
        "cartons": 20,
        "dims": "40x48x62",
        "weight": plan[0].estimated_weight,
    }


def test_consistent_plan_has_no_issues():
    data = build_plan_json(plan_pallets(ORDERS), include_timestamp=False)
    assert find_layout_issues(data) == []


def test_broken_payload_is_reported():
    data = build_plan_json(plan_pallets(ORDERS), include_timestamp=False)
    pallet = data["pallets"][0]
    pallet["layerLayout"][0][0]["coordinate"] = "b1"
    pallet["boxCount"] += 1
    data["totals"]["weight"] += 5

    issues = find_layout_issues(data)

    assert any("stacking order" in msg for msg in issues)
    assert any("boxes placed" in msg for msg in issues)
    assert any(msg.startswith("Totals: weight") for msg in issues)
