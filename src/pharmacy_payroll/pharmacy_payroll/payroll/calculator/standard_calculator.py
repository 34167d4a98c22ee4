from __future__ import annotations

from .base import PayrollCalculator
from ...common.datetime_utils import parse_time_of_day
from ...worklogs.model import WorkLog


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (end - start) - break_minutes, counted only when positive.

    No overnight handling: an end time before the start time yields a negative
    raw value and the shift contributes nothing. Unparseable times also
    contribute nothing instead of failing the whole aggregation.
    """

    def worked_minutes(self, log: WorkLog) -> int:
        start = parse_time_of_day(log.start_time)
        end = parse_time_of_day(log.end_time)
        if start is None or end is None:
            return 0
        net = (end - start) - int(log.break_minutes or 0)
        return net if net > 0 else 0
