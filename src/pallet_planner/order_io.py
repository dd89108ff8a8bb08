from __future__ import annotations

import json
import os
from typing import Any

from .models import PurchaseOrder
from .validation import InputValidationError, coerce_orders


def load_orders(path: str | os.PathLike) -> list[PurchaseOrder]:
    """Read an order manifest.

    The file holds either a list of purchase orders or an object with an
    ``orders`` list (and optionally ``settings``, see ``load_manifest``).
    """
    orders, _ = load_manifest(path)
    return orders


def load_manifest(path: str | os.PathLike) -> tuple[list[PurchaseOrder], dict]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Order file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InputValidationError(
            f"Invalid JSON in order file {path}: {e}", field="orders", value=str(path)
        ) from e
    except UnicodeDecodeError as e:
        raise InputValidationError(
            f"Order file {path} is not UTF-8 text: {e}", field="orders", value=str(path)
        ) from e
    except OSError as e:
        raise InputValidationError(
            f"Cannot read order file {path}: {e}", field="orders", value=str(path)
        ) from e
    settings: dict = {}
    if isinstance(data, dict):
        settings = dict(data.get("settings") or {})
        data = data.get("orders", [])
    return coerce_orders(data), settings


def write_plan(path: str | os.PathLike, payload: Any) -> str:
    """Write an exported plan to ``path``, creating parent folders."""
    directory = os.path.dirname(os.fspath(path))
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return os.fspath(path)


__all__ = [
    "load_orders",
    "load_manifest",
    "write_plan",
]
