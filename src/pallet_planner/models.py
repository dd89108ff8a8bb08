from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from .constants import DEFAULT_GROUPING, DEFAULT_MAX_PALLET_HEIGHT
from .units import INCH, LB


@dataclass
class OrderLine:
    """One SKU line of a purchase order, as entered."""

    sku: str
    quantity: Any
    units_per_box: Any = None


@dataclass
class PurchaseOrder:
    po: str
    lines: list[OrderLine] = field(default_factory=list)


@dataclass(frozen=True)
class Settings:
    max_pallet_height: INCH = DEFAULT_MAX_PALLET_HEIGHT
    grouping: str = DEFAULT_GROUPING


@dataclass(frozen=True)
class Carton:
    """A single physical box of one SKU."""

    id: str
    po: str
    sku: str
    units_per_box: int
    group_key: str


@dataclass(frozen=True)
class LayerSlot:
    coordinate: str
    label: str
    sku: str


@dataclass(frozen=True)
class Layer:
    breakdown: dict[str, int]
    mapping: list[LayerSlot]

    @property
    def count(self) -> int:
        return len(self.mapping)


@dataclass(frozen=True)
class Pallet:
    pallet_number: int
    box_count: int
    layers: int
    estimated_height: INCH
    estimated_weight: LB
    dims: str
    layer_breakdown: list[dict[str, int]]
    layer_layout: list[list[LayerSlot]]
    cartons: tuple[Carton, ...] = ()


@dataclass(frozen=True)
class PalletSummary:
    pallet: int
    cartons: int
    dims: str
    weight: LB


@dataclass(frozen=True)
class PlanTotals:
    pallets: int = 0
    cartons: int = 0
    weight: LB = 0


@dataclass(frozen=True)
class PalletPlan:
    """Ordered pallets with the aggregate totals attached.

    Iterating a plan yields its pallets, so it can be used wherever a plain
    sequence of pallets is expected.
    """

    pallets: list[Pallet]
    totals: PlanTotals
    settings: Settings
    capacity: int = 0
    targets: list[int] = field(default_factory=list)

    @classmethod
    def empty(cls, settings: Settings, capacity: int = 0) -> "PalletPlan":
        return cls(pallets=[], totals=PlanTotals(), settings=settings, capacity=capacity)

    @property
    def summaries(self) -> list[PalletSummary]:
        return [
            PalletSummary(
                pallet=pallet.pallet_number,
                cartons=pallet.box_count,
                dims=pallet.dims,
                weight=pallet.estimated_weight,
            )
            for pallet in self.pallets
        ]

    def pallet(self, number: int) -> Pallet | None:
        for pallet in self.pallets:
            if pallet.pallet_number == number:
                return pallet
        return None

    def __iter__(self) -> Iterator[Pallet]:
        return iter(self.pallets)

    def __len__(self) -> int:
        return len(self.pallets)

    def __getitem__(self, index: int) -> Pallet:
        return self.pallets[index]
