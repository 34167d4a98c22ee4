from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Profile role used for authorization."""

    ADMIN = "admin"
    MANAGER = "manager"
    STAFF = "staff"

    @property
    def is_reviewer(self) -> bool:
        return self in (Role.ADMIN, Role.MANAGER)


class WorkLogStatus(str, Enum):
    """Work-log lifecycle state as stored in the database."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_owner_mutable(self) -> bool:
        return self in OWNER_MUTABLE_STATUSES


OWNER_MUTABLE_STATUSES = frozenset({WorkLogStatus.DRAFT, WorkLogStatus.REJECTED})
