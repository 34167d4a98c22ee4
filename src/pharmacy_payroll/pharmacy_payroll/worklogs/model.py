from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..core.enums import Role, WorkLogStatus


@dataclass(frozen=True)
class Actor:
    """Capability passed into every lifecycle call: who is acting, with which role."""

    user_id: str
    role: Role

    @property
    def is_reviewer(self) -> bool:
        return self.role.is_reviewer


@dataclass(frozen=True)
class WorkLogEntry:
    """Owner-editable fields, as typed into the work-log form."""

    work_date: Any
    start_time: Any
    end_time: Any
    break_minutes: Any = 0
    note: Optional[str] = None


@dataclass(frozen=True)
class WorkLog:
    """Domain entity: one shift record."""

    id: str
    owner_id: str
    work_date: date
    start_time: str
    end_time: str
    break_minutes: int
    status: WorkLogStatus
    note: Optional[str] = None
    reviewer_id: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    reject_reason: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["work_date"] = self.work_date.isoformat()
        data["status"] = self.status.value
        data["reviewed_at"] = self.reviewed_at.isoformat() if self.reviewed_at else None
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data
