"""Spending summaries and unit price comparison."""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Optional

from keranjang.config.settings import get_settings
from keranjang.domain.types import HistoryRecord
from keranjang.parser.categories import resolve_category


@dataclass
class CategoryStat:
    """Spending for one category."""
    category: str
    total: float
    count: int
    percentage: float


@dataclass
class PriceComparison:
    """Which of two offers is cheaper per unit, and by how much."""
    winner: Optional[Literal["A", "B", "Tie"]]
    savings_percent: Optional[int] = None


def calculate_total_spending(records: Iterable[HistoryRecord]) -> float:
    return sum(record.final_price for record in records)


def group_spending_by_category(
    records: Iterable[HistoryRecord],
    other: Optional[str] = None
) -> List[CategoryStat]:
    """Totals per category, largest first. Missing categories count as Other."""
    records = list(records)
    other = other or get_settings().OTHER_CATEGORY
    total_spending = calculate_total_spending(records)

    groups: Dict[str, List[float]] = {}
    for record in records:
        groups.setdefault(resolve_category(record.category, other), []).append(record.final_price)

    stats = [
        CategoryStat(
            category=category,
            total=sum(prices),
            count=len(prices),
            percentage=(sum(prices) / total_spending * 100) if total_spending > 0 else 0.0
        )
        for category, prices in groups.items()
    ]
    return sorted(stats, key=lambda stat: stat.total, reverse=True)


def compare_unit_prices(
    price_a: float,
    qty_a: float,
    price_b: float,
    qty_b: float
) -> PriceComparison:
    """
    Compare two offers by price per unit.

    Returns:
        The cheaper offer and the saving relative to the dearer one, rounded
        to a whole percent; ``winner=None`` when a quantity is not positive
    """
    if qty_a <= 0 or qty_b <= 0:
        return PriceComparison(winner=None)

    unit_a = price_a / qty_a
    unit_b = price_b / qty_b
    if unit_a < unit_b:
        return PriceComparison(winner="A", savings_percent=round((unit_b - unit_a) / unit_b * 100))
    if unit_b < unit_a:
        return PriceComparison(winner="B", savings_percent=round((unit_a - unit_b) / unit_a * 100))
    return PriceComparison(winner="Tie")
