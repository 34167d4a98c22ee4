from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_PAYROLL_DAYS, PAYROLL_PERIOD_CHOICES
from ..core.enums import WorkLogStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..profiles.repository import ProfileRepository
from ..worklogs.model import Actor
from ..worklogs.repository import WorkLogRepository
from .aggregator import aggregate
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollLine, PayrollReport

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        work_logs: WorkLogRepository,
        profiles: ProfileRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._work_logs = work_logs
        self._profiles = profiles
        self._calculator = calculator or StandardPayrollCalculator()

    def summary_for(
        self,
        actor: Actor,
        *,
        days: int = DEFAULT_PAYROLL_DAYS,
        user_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> PayrollReport:
        """Payroll estimate over approved logs from the last ``days`` days."""

        if days not in PAYROLL_PERIOD_CHOICES:
            raise ValidationError(f"Period must be one of {', '.join(map(str, PAYROLL_PERIOD_CHOICES))} days")

        target_id = str(user_id) if user_id else actor.user_id
        if target_id != actor.user_id and not actor.is_reviewer:
            raise AuthorizationError("You can only view your own payroll")

        profile = self._profiles.get_by_id(target_id)
        if not profile:
            raise NotFoundError("Profile not found")

        today = today or today_local()
        since = today - timedelta(days=days)
        logs = self._work_logs.list(owner_id=target_id, status=WorkLogStatus.APPROVED, since=since)

        summary = aggregate(logs, profile.pay_config, calculator=self._calculator)
        lines = tuple(PayrollLine(log=log, worked_minutes=self._calculator.worked_minutes(log)) for log in logs)
        logger.debug(
            "[payroll] user_id=%s days=%s logs=%s minutes=%s",
            target_id, days, len(logs), summary.total_worked_minutes,
        )
        return PayrollReport(
            user_id=target_id,
            period_start=since,
            period_end=today,
            days=days,
            pay_config=profile.pay_config,
            summary=summary,
            lines=lines,
        )
