from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..common.formatting import format_krw, format_worked_minutes
from ..worklogs.model import WorkLog


@dataclass(frozen=True)
class PayConfig:
    hourly_rate: float
    tax_rate: float


@dataclass(frozen=True)
class PayrollSummary:
    """Unrounded aggregation result; rounding is left to the display layer."""

    total_worked_minutes: int
    total_hours: float
    gross_pay: float
    net_pay: float


@dataclass(frozen=True)
class PayrollLine:
    """One approved log in the report, with the minutes it contributed."""

    log: WorkLog
    worked_minutes: int

    def to_dict(self) -> dict:
        data = self.log.to_dict()
        data["worked_minutes"] = self.worked_minutes
        data["worked"] = format_worked_minutes(self.worked_minutes)
        return data


@dataclass(frozen=True)
class PayrollReport:
    user_id: str
    period_start: date
    period_end: date
    days: int
    pay_config: PayConfig
    summary: PayrollSummary
    lines: Sequence[PayrollLine] = ()

    @property
    def log_count(self) -> int:
        return len(self.lines)

    def to_dict(self) -> dict:
        s = self.summary
        return {
            "user_id": self.user_id,
            "period_start": self.period_start.isoformat(),
            "period_end": self.period_end.isoformat(),
            "days": self.days,
            "hourly_rate": self.pay_config.hourly_rate,
            "tax_rate": self.pay_config.tax_rate,
            "log_count": self.log_count,
            "total_worked_minutes": s.total_worked_minutes,
            "total_hours": s.total_hours,
            "gross_pay": s.gross_pay,
            "net_pay": s.net_pay,
            "display": {
                "worked": format_worked_minutes(s.total_worked_minutes),
                "gross_pay": format_krw(s.gross_pay),
                "net_pay": format_krw(s.net_pay),
            },
            "logs": [line.to_dict() for line in self.lines],
        }
