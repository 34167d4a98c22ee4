"""Display helpers. Rounding happens here only, never in the payroll core."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_krw(amount: float) -> str:
    # Halves round up (2.5 -> 3), not to even.
    won = int(Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return f"{won:,}원"


def format_worked_minutes(minutes: int) -> str:
    return f"{minutes // 60}시간 {minutes % 60}분"
