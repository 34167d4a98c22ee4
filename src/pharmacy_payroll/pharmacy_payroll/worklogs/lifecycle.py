"""Work-log state machine.

    draft --submit--> submitted --approve--> approved
      ^                   |
      +--edit-- rejected <+ reject

Each transition takes the current immutable ``WorkLog`` plus the acting
``Actor`` and returns the next ``WorkLog``. Illegal transitions raise and never
return a partially updated record.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_time_of_day, parse_iso_date, parse_time_of_day
from ..common.validators import optional_text, require_non_empty, require_non_negative_int
from ..core.enums import WorkLogStatus
from ..core.exceptions import AuthorizationError, InvalidStateError, ValidationError
from .model import Actor, WorkLog, WorkLogEntry


def _clean_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = require_non_empty(value, "Work date")
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError("Work date must be YYYY-MM-DD")


def _clean_time(value, field_name: str) -> str:
    if isinstance(value, str):
        value = require_non_empty(value, field_name)
    elif value is None:
        raise ValidationError(f"{field_name} is required")
    minutes = parse_time_of_day(value)
    if minutes is None:
        raise ValidationError(f"{field_name} must be HH:MM")
    return format_time_of_day(minutes)


def _clean_break(value) -> int:
    if value is None or value == "":
        return 0
    return require_non_negative_int(value, "Break minutes")


def validate_entry(entry: WorkLogEntry) -> dict:
    """Normalise form input into stored field values."""
    return {
        "work_date": _clean_date(entry.work_date),
        "start_time": _clean_time(entry.start_time, "Start time"),
        "end_time": _clean_time(entry.end_time, "End time"),
        "break_minutes": _clean_break(entry.break_minutes),
        "note": optional_text(entry.note),
    }


def _require_owner(log: WorkLog, actor: Actor) -> None:
    if log.owner_id != actor.user_id:
        raise AuthorizationError("Only the owner can change this work log")


def _require_owner_mutable(log: WorkLog, action: str) -> None:
    if not log.status.is_owner_mutable:
        raise InvalidStateError(f"Cannot {action} a work log that is {log.status.value}")


def _require_reviewer(actor: Actor) -> None:
    if not actor.is_reviewer:
        raise AuthorizationError("Only an admin or manager can review work logs")


def _require_submitted(log: WorkLog, action: str) -> None:
    if log.status != WorkLogStatus.SUBMITTED:
        raise InvalidStateError(f"Cannot {action} a work log that is {log.status.value}")


def create_work_log(actor: Actor, entry: WorkLogEntry, *, log_id: Optional[str] = None) -> WorkLog:
    fields = validate_entry(entry)
    return WorkLog(
        id=log_id or str(uuid.uuid4()),
        owner_id=actor.user_id,
        status=WorkLogStatus.DRAFT,
        **fields,
    )


def edit_work_log(log: WorkLog, actor: Actor, entry: WorkLogEntry) -> WorkLog:
    _require_owner(log, actor)
    _require_owner_mutable(log, "edit")
    fields = validate_entry(entry)
    return replace(log, status=WorkLogStatus.DRAFT, reject_reason=None, **fields)


def submit_work_log(log: WorkLog, actor: Actor) -> WorkLog:
    _require_owner(log, actor)
    _require_owner_mutable(log, "submit")
    return replace(log, status=WorkLogStatus.SUBMITTED)


def approve_work_log(log: WorkLog, actor: Actor, *, now: datetime) -> WorkLog:
    _require_reviewer(actor)
    _require_submitted(log, "approve")
    return replace(
        log,
        status=WorkLogStatus.APPROVED,
        reviewer_id=actor.user_id,
        reviewed_at=now,
        reject_reason=None,
    )


def reject_work_log(log: WorkLog, actor: Actor, *, now: datetime, reason: Optional[str] = None) -> WorkLog:
    _require_reviewer(actor)
    _require_submitted(log, "reject")
    return replace(
        log,
        status=WorkLogStatus.REJECTED,
        reviewer_id=actor.user_id,
        reviewed_at=now,
        reject_reason=optional_text(reason),
    )


def check_deletable(log: WorkLog, actor: Actor) -> None:
    _require_owner(log, actor)
    _require_owner_mutable(log, "delete")
