from __future__ import annotations

from abc import ABC, abstractmethod

from ...worklogs.model import WorkLog


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_minutes(self, log: WorkLog) -> int:
        """Minutes this log adds to the payroll total (never negative)."""

        raise NotImplementedError
