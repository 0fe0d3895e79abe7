"""Integer splitting of trade totals across weighted routes."""

from collections.abc import Sequence

from swaproute.constants import PERCENT_TOTAL


def split_amount(total: int, percents: Sequence[int]) -> list[int]:
    """Split a total into per-route amounts by percentage.

    Every route but the last gets total * percent // 100. The last route
    gets whatever remains, so the parts always sum to exactly `total`.

    Args:
        total: Non-negative integer quantity to split
        percents: Route percentages summing to 100

    Returns:
        Per-route amounts, in route order

    Raises:
        ValueError: If total is negative, percents is empty, or the
            percentages do not sum to 100
    """
    if total < 0:
        raise ValueError(f"Cannot split a negative amount: {total}")
    if not percents:
        raise ValueError("Cannot split across zero routes")
    if sum(percents) != PERCENT_TOTAL:
        raise ValueError(f"Percentages sum to {sum(percents)}, expected {PERCENT_TOTAL}")

    parts = [total * percent // PERCENT_TOTAL for percent in percents[:-1]]
    parts.append(total - sum(parts))
    return parts
