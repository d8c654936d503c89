"""Enumeration types used throughout the receipt points API.

Each member of ``ScoringRule`` names one independent contribution to a
receipt's point total. The rule engine keys its handler registry and
its per-rule breakdown by these values, so adding a rule means adding a
member here and a handler in :mod:`receipt_points.services.rule_engine`.
"""

from enum import Enum


class ScoringRule(str, Enum):
    """Point rules applied to every submitted receipt."""

    RETAILER_NAME = "retailer_name"
    ROUND_DOLLAR = "round_dollar"
    QUARTER_MULTIPLE = "quarter_multiple"
    ITEM_PAIRS = "item_pairs"
    DESCRIPTION_LENGTH = "description_length"
    ODD_DAY = "odd_day"
    AFTERNOON_PURCHASE = "afternoon_purchase"
