from __future__ import annotations

import logging
from dataclasses import fields as dataclass_fields
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import OWNER_MUTABLE_STATUSES, WorkLogStatus
from ..core.exceptions import AuthorizationError, InvalidStateError, NotFoundError
from ..profiles.repository import ProfileRepository
from .lifecycle import (
    approve_work_log,
    check_deletable,
    create_work_log,
    edit_work_log,
    reject_work_log,
    submit_work_log,
)
from .model import Actor, WorkLog, WorkLogEntry
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = frozenset({"id", "owner_id", "created_at"})


def changed_fields(before: WorkLog, after: WorkLog) -> dict:
    out = {}
    for f in dataclass_fields(WorkLog):
        if f.name in _IMMUTABLE_FIELDS:
            continue
        new = getattr(after, f.name)
        if getattr(before, f.name) != new:
            out[f.name] = new
    return out


class WorkLogService:
    """Use case: the work-log lifecycle (create, edit, submit, approve, reject, delete)."""

    def __init__(
        self,
        work_logs: WorkLogRepository,
        profiles: Optional[ProfileRepository] = None,
        *,
        clock: Callable = now_local,
    ):
        self._work_logs = work_logs
        self._profiles = profiles
        self._clock = clock

    def _load(self, log_id: str) -> WorkLog:
        log = self._work_logs.get(str(log_id))
        if not log:
            raise NotFoundError("Work log not found")
        return log

    def _persist(self, before: WorkLog, after: WorkLog, *, owner_id: Optional[str] = None) -> WorkLog:
        ok = self._work_logs.update(
            before.id,
            changed_fields(before, after),
            expected_statuses=[before.status],
            owner_id=owner_id,
        )
        if not ok:
            # Row vanished or changed status between read and write.
            current = self._work_logs.get(before.id)
            if not current:
                raise NotFoundError("Work log not found")
            raise InvalidStateError(f"Work log is now {current.status.value}; reload and try again")
        return after

    def create(self, actor: Actor, entry: WorkLogEntry) -> WorkLog:
        log = create_work_log(actor, entry)
        self._work_logs.create(log)
        logger.info("[worklog] created id=%s owner=%s date=%s", log.id, log.owner_id, log.work_date)
        return log

    def get(self, actor: Actor, log_id: str) -> WorkLog:
        log = self._load(log_id)
        if log.owner_id != actor.user_id and not actor.is_reviewer:
            raise AuthorizationError("You cannot view this work log")
        return log

    def edit(self, actor: Actor, log_id: str, entry: WorkLogEntry) -> WorkLog:
        before = self._load(log_id)
        after = edit_work_log(before, actor, entry)
        self._persist(before, after, owner_id=actor.user_id)
        logger.info("[worklog] edited id=%s (%s -> %s)", after.id, before.status.value, after.status.value)
        return after

    def submit(self, actor: Actor, log_id: str) -> WorkLog:
        before = self._load(log_id)
        after = submit_work_log(before, actor)
        self._persist(before, after, owner_id=actor.user_id)
        logger.info("[worklog] submitted id=%s owner=%s", after.id, after.owner_id)
        return after

    def approve(self, actor: Actor, log_id: str) -> WorkLog:
        before = self._load(log_id)
        after = approve_work_log(before, actor, now=self._clock())
        self._persist(before, after)
        logger.info("[worklog] approved id=%s by=%s", after.id, actor.user_id)
        return after

    def reject(self, actor: Actor, log_id: str, reason: Optional[str] = None) -> WorkLog:
        before = self._load(log_id)
        after = reject_work_log(before, actor, now=self._clock(), reason=reason)
        self._persist(before, after)
        logger.info("[worklog] rejected id=%s by=%s", after.id, actor.user_id)
        return after

    def delete(self, actor: Actor, log_id: str) -> None:
        log = self._load(log_id)
        check_deletable(log, actor)
        ok = self._work_logs.delete(log.id, expected_statuses=OWNER_MUTABLE_STATUSES, owner_id=actor.user_id)
        if not ok:
            current = self._work_logs.get(log.id)
            if not current:
                raise NotFoundError("Work log not found")
            raise InvalidStateError(f"Cannot delete a work log that is {current.status.value}")
        logger.info("[worklog] deleted id=%s owner=%s", log.id, actor.user_id)

    def list_mine(self, actor: Actor) -> Sequence[WorkLog]:
        return self._work_logs.list(owner_id=actor.user_id)

    def list_pending(self, actor: Actor) -> list[dict]:
        """Submitted logs awaiting review, each with the owner's name/email."""

        if not actor.is_reviewer:
            raise AuthorizationError("Only an admin or manager can review work logs")

        logs = self._work_logs.list(status=WorkLogStatus.SUBMITTED)
        owners = {}
        if self._profiles and logs:
            owners = {p.id: p for p in self._profiles.get_many({log.owner_id for log in logs})}

        out: list[dict] = []
        for log in logs:
            owner = owners.get(log.owner_id)
            row = log.to_dict()
            row["owner_name"] = owner.display_name if owner else log.owner_id
            row["owner_email"] = owner.email if owner else None
            out.append(row)
        return out
