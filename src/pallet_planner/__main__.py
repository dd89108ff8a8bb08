from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from importlib import metadata

from .constants import GROUPINGS
from .engine import plan_pallets
from .models import PalletPlan
from .order_io import load_manifest, write_plan
from .plan_export import build_plan_json
from .validation import PlanningError

logger = logging.getLogger(__name__)


def _get_app_version() -> str:
    try:
        return metadata.version("pallet-planner")
    except metadata.PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pallet-planner",
        description="Plan how purchase-order cartons are stacked onto pallets.",
    )
    parser.add_argument("orders", help="JSON order manifest")
    parser.add_argument("--max-height", type=str, default=None, help="maximum pallet height in inches")
    parser.add_argument("--grouping", choices=GROUPINGS, default=None)
    parser.add_argument("--json", action="store_true", help="print the plan as JSON")
    parser.add_argument("--output", metavar="PATH", help="also write the plan JSON to PATH")
    parser.add_argument("--plot", metavar="DIR", help="write one layer diagram per pallet into DIR")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_app_version()}")
    return parser


def format_plan(plan: PalletPlan) -> str:
    lines = [f"{'Pallet':>6}  {'Cartons':>7}  {'Layers':>6}  {'Dims':<12}  {'Weight':>7}"]
    for pallet in plan:
        lines.append(
            f"{pallet.pallet_number:>6}  {pallet.box_count:>7}  {pallet.layers:>6}  "
            f"{pallet.dims:<12}  {pallet.estimated_weight:>7}"
        )
    totals = plan.totals
    lines.append(
        f"Total: {totals.pallets} pallets, {totals.cartons} cartons, {totals.weight} lbs"
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        orders, settings = load_manifest(args.orders)
        if args.max_height is not None:
            settings["max_pallet_height"] = args.max_height
            settings.pop("maxPalletHeight", None)
        if args.grouping is not None:
            settings["grouping"] = args.grouping
        plan = plan_pallets(orders, settings)
    except (PlanningError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    payload = build_plan_json(plan)
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(format_plan(plan))

    if args.output:
        try:
            path = write_plan(args.output, payload)
        except OSError as exc:
            print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
            return 1
        logger.info("Wrote plan to %s", path)

    if args.plot:
        from .plot import save_pallet_plot

        os.makedirs(args.plot, exist_ok=True)
        for pallet in plan:
            try:
                save_pallet_plot(pallet, os.path.join(args.plot, f"pallet_{pallet.pallet_number}.png"))
            except Exception:
                logger.exception("Failed to plot pallet %d", pallet.pallet_number)
                return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
