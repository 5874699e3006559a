"""
Helpers for adding up bags of optional amounts.

Closing fees, seller credits, fixed expenses and rehab line items are all
"sum whatever is filled in" totals. Every calculator uses these helpers so
the strategies agree on how blanks are treated.
"""

import math
from typing import Iterable, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

Amounts = Union[Mapping[str, Optional[float]], Iterable[Optional[float]]]


def sum_amounts(amounts: Optional[Amounts]) -> float:
    """
    Add amounts left to right, counting missing or NaN entries as 0.

    Args:
        amounts: Mapping of line item name to amount, or a plain iterable

    Returns:
        Total (0.0 for an empty or missing bag)
    """
    if amounts is None:
        return 0.0
    if isinstance(amounts, Mapping):
        amounts = amounts.values()

    total = 0.0
    for amount in amounts:
        if amount is None or math.isnan(amount):
            continue
        total += amount
    return total


def pick_amounts(record: BaseModel, fields: Sequence[str]) -> dict:
    """Collect the named fields of a record, in order, as a line-item bag."""
    return {name: getattr(record, name, None) for name in fields}
