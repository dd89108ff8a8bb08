"""Pallet planning for purchase-order cartons."""

from .assigner import assign_groups, group_cartons
from .engine import build_pallet, plan_pallets
from .expander import expand_cartons, group_key_for
from .layers import build_layers
from .models import (
    Carton,
    Layer,
    LayerSlot,
    OrderLine,
    Pallet,
    PalletPlan,
    PalletSummary,
    PlanTotals,
    PurchaseOrder,
    Settings,
)
from .stacking import compute_capacity, compute_max_stack, compute_num_layers
from .targets import allocate_targets, compute_pallet_count
from .validation import ConfigurationError, InputValidationError, PlanningError

__all__ = [
    "Carton",
    "Layer",
    "LayerSlot",
    "OrderLine",
    "Pallet",
    "PalletPlan",
    "PalletSummary",
    "PlanTotals",
    "PurchaseOrder",
    "Settings",
    "plan_pallets",
    "build_pallet",
    "expand_cartons",
    "group_key_for",
    "compute_capacity",
    "compute_max_stack",
    "compute_num_layers",
    "allocate_targets",
    "compute_pallet_count",
    "group_cartons",
    "assign_groups",
    "build_layers",
    "PlanningError",
    "ConfigurationError",
    "InputValidationError",
]
