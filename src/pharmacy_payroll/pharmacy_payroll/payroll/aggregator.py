from __future__ import annotations

from typing import Iterable, Optional

from ..worklogs.model import WorkLog
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayConfig, PayrollSummary


def aggregate(
    logs: Iterable[WorkLog],
    pay_config: PayConfig,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> PayrollSummary:
    """Sum worked minutes over ``logs`` and derive gross/net pay.

    The caller is responsible for passing only approved logs; nothing is
    filtered here. Order of ``logs`` does not matter.
    """

    calculator = calculator or StandardPayrollCalculator()

    total_minutes = 0
    for log in logs:
        total_minutes += calculator.worked_minutes(log)

    total_hours = total_minutes / 60
    gross = total_hours * pay_config.hourly_rate
    net = gross * (1 - pay_config.tax_rate)
    return PayrollSummary(
        total_worked_minutes=total_minutes,
        total_hours=total_hours,
        gross_pay=gross,
        net_pay=net,
    )
