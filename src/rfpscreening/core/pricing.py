"""Cost estimation for a matched catalog item."""

from __future__ import annotations

from dataclasses import dataclass

from ..schemas import CatalogItem
from .numbers import round_half_up


@dataclass(frozen=True)
class PricingConfig:
    """Surcharge rates applied on top of the material cost."""

    implementation_rate: float = 0.20
    support_rate: float = 0.10
    contingency_rate: float = 0.03

    def __post_init__(self) -> None:
        if min(self.implementation_rate, self.support_rate, self.contingency_rate) < 0:
            raise ValueError("Pricing rates must be non-negative")


@dataclass(frozen=True, slots=True)
class LineItem:
    item: str
    cost: int


@dataclass(frozen=True, slots=True)
class PricingBreakdown:
    """Rounded cost terms; ``total_cost`` is the sum of the rounded terms."""

    sku: str
    product_name: str
    unit_price: float
    quantity: float
    material_cost: int
    implementation: int
    support: int
    contingency: int
    total_cost: int
    line_items: tuple[LineItem, ...]


class PricingCalculator:
    """Derive the project cost for supplying ``quantity`` units of an item."""

    def __init__(self, *, config: PricingConfig | None = None) -> None:
        self._config = config or PricingConfig()

    def price(self, item: CatalogItem, quantity: float) -> PricingBreakdown:
        material = round_half_up(item.cost_per_unit * quantity)
        implementation = round_half_up(material * self._config.implementation_rate)
        support = round_half_up(material * self._config.support_rate)
        contingency = round_half_up(material * self._config.contingency_rate)
        total = material + implementation + support + contingency

        return PricingBreakdown(
            sku=item.sku,
            product_name=item.product_name,
            unit_price=item.cost_per_unit,
            quantity=quantity,
            material_cost=material,
            implementation=implementation,
            support=support,
            contingency=contingency,
            total_cost=total,
            line_items=(
                LineItem(f"Material ({item.product_name})", material),
                LineItem("Implementation & Integration", implementation),
                LineItem("Annual Support", support),
                LineItem("Contingency", contingency),
            ),
        )
