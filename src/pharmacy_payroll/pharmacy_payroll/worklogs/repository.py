from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence

from ..core.enums import WorkLogStatus
from .model import WorkLog


class WorkLogRepository(Protocol):
    """Durable store for work logs.

    Note: ``update``/``delete`` are conditional. They only touch the row when
    it still has one of ``expected_statuses`` (and belongs to ``owner_id`` when
    given) and return False otherwise, which is how ownership and
    owner-mutable states are enforced on the storage side too.
    """

    def create(self, log: WorkLog) -> None:
        raise NotImplementedError

    def get(self, log_id: str) -> Optional[WorkLog]:
        raise NotImplementedError

    def update(
        self,
        log_id: str,
        fields: Mapping[str, Any],
        *,
        expected_statuses: Iterable[WorkLogStatus],
        owner_id: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(
        self,
        log_id: str,
        *,
        expected_statuses: Iterable[WorkLogStatus],
        owner_id: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def list(
        self,
        *,
        owner_id: Optional[str] = None,
        status: Optional[WorkLogStatus] = None,
        since: Optional[date] = None,
    ) -> Sequence[WorkLog]:
        """Ordered by work_date DESC, start_time DESC."""

        raise NotImplementedError
