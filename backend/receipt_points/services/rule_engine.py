"""Rule engine for scoring receipts.

The engine applies a fixed set of independent point rules to a
:class:`~receipt_points.models.schemas.Receipt` and sums their
contributions. Each rule is a small pure function registered in
``HANDLERS`` under a :class:`~receipt_points.models.enums.ScoringRule`
member:

* ``retailer_name`` – one point per ASCII letter or digit in the
  retailer name.
* ``round_dollar`` – 50 points when the total has no cents.
* ``quarter_multiple`` – 25 points when the total is a nonzero
  multiple of ``0.25``.
* ``item_pairs`` – 5 points for every two items.
* ``description_length`` – for each item whose trimmed description
  length in UTF-8 bytes is a nonzero multiple of 3, ``ceil(price * 0.2)`` points.
* ``odd_day`` – 6 points when the purchase day of month is odd.
* ``afternoon_purchase`` – 10 points for purchases from 14:01 through
  15:59.

A field that cannot be parsed contributes zero to its rule; it never
aborts scoring. Money is handled as :class:`decimal.Decimal` so the
whole-dollar, quarter and ceiling checks are exact.
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_CEILING, Decimal
from typing import Callable, Dict

from receipt_points.models.enums import ScoringRule
from receipt_points.models.schemas import Item, Receipt
from receipt_points.utils.helpers import parse_decimal, parse_purchase_date, parse_purchase_time

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_QUARTER = Decimal("0.25")
_DESCRIPTION_MULTIPLIER = Decimal("0.2")


def _points_for_retailer_name(receipt: Receipt) -> int:
    return len(_NON_ALNUM_RE.sub("", receipt.retailer))


def _points_for_round_dollar(receipt: Receipt) -> int:
    total = parse_decimal(receipt.total)
    if total is None:
        return 0
    return 50 if total == total.to_integral_value() else 0


def _points_for_quarter_multiple(receipt: Receipt) -> int:
    total = parse_decimal(receipt.total)
    if total is None or total == 0:
        return 0
    try:
        remainder = total % _QUARTER
    except ArithmeticError:
        # Quotient exceeds the decimal context precision, e.g. "1e100"
        return 0
    return 25 if remainder == 0 else 0


def _points_for_item_pairs(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * 5


def points_for_item_description(item: Item) -> int:
    """Points for a single line item under the description-length rule."""
    # Length is measured in UTF-8 bytes
    length = len(item.short_description.strip().encode("utf-8"))
    if not length or length % 3 != 0:
        return 0
    price = parse_decimal(item.price)
    if price is None:
        logger.warning("Unparseable item price %r; description rule awards 0", item.price)
        return 0
    try:
        points = (price * _DESCRIPTION_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING)
    except ArithmeticError:
        return 0
    # Negative prices never subtract points
    return max(0, int(points))


def _points_for_description_length(receipt: Receipt) -> int:
    return sum(points_for_item_description(item) for item in receipt.items)


def _points_for_odd_day(receipt: Receipt) -> int:
    purchase_date = parse_purchase_date(receipt.purchase_date)
    if purchase_date is None:
        return 0
    return 6 if purchase_date.day % 2 == 1 else 0


def _points_for_afternoon_purchase(receipt: Receipt) -> int:
    purchase_time = parse_purchase_time(receipt.purchase_time)
    if purchase_time is None:
        return 0
    hour, minute = purchase_time.hour, purchase_time.minute
    if 14 < hour < 16 or (hour == 14 and minute > 0):
        return 10
    return 0


HANDLERS: Dict[ScoringRule, Callable[[Receipt], int]] = {
    ScoringRule.RETAILER_NAME: _points_for_retailer_name,
    ScoringRule.ROUND_DOLLAR: _points_for_round_dollar,
    ScoringRule.QUARTER_MULTIPLE: _points_for_quarter_multiple,
    ScoringRule.ITEM_PAIRS: _points_for_item_pairs,
    ScoringRule.DESCRIPTION_LENGTH: _points_for_description_length,
    ScoringRule.ODD_DAY: _points_for_odd_day,
    ScoringRule.AFTERNOON_PURCHASE: _points_for_afternoon_purchase,
}


def score_breakdown(receipt: Receipt) -> Dict[ScoringRule, int]:
    """Evaluate every rule against a receipt.

    :param receipt: The decoded receipt.
    :returns: A mapping of each :class:`ScoringRule` to the points it
        contributed. Rules are evaluated in declaration order.
    """
    return {rule: HANDLERS[rule](receipt) for rule in ScoringRule}


def compute_score(receipt: Receipt) -> int:
    """Return the total points awarded to ``receipt``."""
    breakdown = score_breakdown(receipt)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "score breakdown: %s",
            ", ".join(f"{rule.value}={points}" for rule, points in breakdown.items()),
        )
    return sum(breakdown.values())
