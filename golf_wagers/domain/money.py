"""Conversions between stake amounts and integer cents."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, Overflow, ROUND_HALF_UP
from typing import Any

CENTS = 100


def to_amount(value: Any) -> Decimal:
    """Parse a stake amount, degrading anything unusable to zero."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        amount = Decimal(str(value).strip() or "0")
    except InvalidOperation:
        return Decimal(0)
    if not amount.is_finite() or amount < 0:
        return Decimal(0)
    return amount


def to_cents(value: Any) -> int:
    amount = to_amount(value)
    try:
        return int((amount * CENTS).to_integral_value(rounding=ROUND_HALF_UP))
    except (InvalidOperation, Overflow):
        return 0


def from_cents(cents: int) -> float:
    return float(Decimal(cents) / CENTS)


def split_evenly(total: int, recipients: int) -> list[int]:
    """Split ``total`` cents into ``recipients`` shares, earlier shares taking the remainder."""
    share, remainder = divmod(total, recipients)
    return [share + (1 if idx < remainder else 0) for idx in range(recipients)]
