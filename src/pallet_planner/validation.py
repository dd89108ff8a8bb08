from __future__ import annotations

from typing import Any, Iterable, Mapping

from .constants import (
    DEFAULT_GROUPING,
    DEFAULT_MAX_PALLET_HEIGHT,
    DEFAULT_UNITS_PER_BOX,
    GROUPINGS,
)
from .models import OrderLine, PurchaseOrder, Settings
from .units import to_number


class PlanningError(ValueError):
    """Base class for errors that stop a planning run."""

    def __init__(self, message: str, *, field: str = "", value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class ConfigurationError(PlanningError):
    """Settings that make planning impossible."""


class InputValidationError(PlanningError):
    """Order data that cannot be planned."""


def _first(mapping: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    return default


def validate_settings(settings: Settings | Mapping[str, Any] | None) -> Settings:
    """Return normalized settings or raise before any planning happens."""
    if settings is None:
        return Settings()
    if isinstance(settings, Settings):
        raw_height = settings.max_pallet_height
        grouping = settings.grouping
    elif isinstance(settings, Mapping):
        raw_height = _first(settings, "max_pallet_height", "maxPalletHeight")
        grouping = _first(settings, "grouping")
    else:
        raise ConfigurationError(
            f"settings must be a mapping or Settings, got {type(settings).__name__}",
            field="settings",
            value=settings,
        )

    if raw_height is None or raw_height == "":
        height = DEFAULT_MAX_PALLET_HEIGHT
    else:
        try:
            height = to_number(raw_height)
        except ValueError:
            raise InputValidationError(
                f"max_pallet_height must be a number, got {raw_height!r}",
                field="max_pallet_height",
                value=raw_height,
            ) from None
        if height <= 0:
            raise InputValidationError(
                f"max_pallet_height must be greater than 0, got {raw_height!r}",
                field="max_pallet_height",
                value=raw_height,
            )

    if grouping is None or grouping == "":
        grouping = DEFAULT_GROUPING
    if grouping not in GROUPINGS:
        raise ConfigurationError(
            f"grouping must be one of {', '.join(GROUPINGS)}, got {grouping!r}",
            field="grouping",
            value=grouping,
        )
    return Settings(max_pallet_height=height, grouping=grouping)


def line_context(po: str, index: int) -> str:
    return f"PO {po!r} line {index + 1}" if po else f"line {index + 1}"


def parse_quantity(value: Any, *, context: str = "") -> float:
    """Quantities are whole units; 0 is allowed and yields no cartons."""
    prefix = f"{context}: " if context else ""
    try:
        number = to_number(value)
    except ValueError:
        raise InputValidationError(
            f"{prefix}quantity must be a number, got {value!r}",
            field="quantity",
            value=value,
        ) from None
    if number < 0:
        raise InputValidationError(
            f"{prefix}quantity must not be negative, got {value!r}",
            field="quantity",
            value=value,
        )
    return int(number) if number.is_integer() else number


def parse_units_per_box(value: Any, *, context: str = "") -> float:
    prefix = f"{context}: " if context else ""
    if value is None or value == "" or value == 0:
        return DEFAULT_UNITS_PER_BOX
    try:
        number = to_number(value)
    except ValueError:
        raise InputValidationError(
            f"{prefix}units_per_box must be a number, got {value!r}",
            field="units_per_box",
            value=value,
        ) from None
    if number < 0:
        raise InputValidationError(
            f"{prefix}units_per_box must be greater than 0, got {value!r}",
            field="units_per_box",
            value=value,
        )
    if number == 0:
        return DEFAULT_UNITS_PER_BOX
    return int(number) if number.is_integer() else number


def _coerce_line(raw: Any, po: str, index: int) -> OrderLine:
    if isinstance(raw, OrderLine):
        return raw
    if not isinstance(raw, Mapping):
        raise InputValidationError(
            f"{line_context(po, index)}: expected a mapping, got {type(raw).__name__}",
            field="lines",
            value=raw,
        )
    if "quantity" not in raw:
        raise InputValidationError(
            f"{line_context(po, index)}: missing quantity",
            field="quantity",
            value=None,
        )
    return OrderLine(
        sku=str(_first(raw, "sku", default="")),
        quantity=raw["quantity"],
        units_per_box=_first(raw, "units_per_box", "unitsPerBox"),
    )


def coerce_orders(orders: Iterable[Any] | None) -> list[PurchaseOrder]:
    """Accept ``PurchaseOrder`` objects or plain mappings.

    Mappings may use ``lines`` or ``skus`` for their line list, and either
    ``units_per_box`` or ``unitsPerBox`` per line.
    """
    if orders is None:
        return []
    if isinstance(orders, (str, bytes, Mapping)):
        raise InputValidationError(
            "orders must be a sequence of purchase orders",
            field="orders",
            value=orders,
        )
    result: list[PurchaseOrder] = []
    for order_index, raw in enumerate(orders):
        if isinstance(raw, PurchaseOrder):
            result.append(raw)
            continue
        if not isinstance(raw, Mapping):
            raise InputValidationError(
                f"order {order_index + 1}: expected a mapping, got {type(raw).__name__}",
                field="orders",
                value=raw,
            )
        po = str(_first(raw, "po", default="") or "")
        raw_lines = _first(raw, "lines", "skus", default=[]) or []
        lines = [_coerce_line(line, po, idx) for idx, line in enumerate(raw_lines)]
        result.append(PurchaseOrder(po=po, lines=lines))
    return result
