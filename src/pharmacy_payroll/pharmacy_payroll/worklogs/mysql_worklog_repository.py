from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.enums import WorkLogStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause, normalize_mysql_time
from .model import WorkLog
from .repository import WorkLogRepository

_SELECT_COLUMNS = """
    id, user_id, work_date, start_time, end_time, break_minutes, note,
    status, approved_by, approved_at, reject_reason, created_at
"""

# domain field -> column
_COLUMNS = {
    "work_date": "work_date",
    "start_time": "start_time",
    "end_time": "end_time",
    "break_minutes": "break_minutes",
    "note": "note",
    "status": "status",
    "reviewer_id": "approved_by",
    "reviewed_at": "approved_at",
    "reject_reason": "reject_reason",
}


def _to_db(value: Any) -> Any:
    if isinstance(value, WorkLogStatus):
        return value.value
    return value


def _row_to_log(r: dict) -> WorkLog:
    return WorkLog(
        id=str(r["id"]),
        owner_id=str(r["user_id"]),
        work_date=r["work_date"],
        start_time=normalize_mysql_time(r.get("start_time")) or "",
        end_time=normalize_mysql_time(r.get("end_time")) or "",
        break_minutes=int(r.get("break_minutes") or 0),
        note=r.get("note"),
        status=WorkLogStatus(r["status"]),
        reviewer_id=str(r["approved_by"]) if r.get("approved_by") else None,
        reviewed_at=r.get("approved_at"),
        reject_reason=r.get("reject_reason"),
        created_at=r.get("created_at"),
    )


def _guard(
    log_id: str,
    expected_statuses: Iterable[WorkLogStatus],
    owner_id: Optional[str],
) -> tuple[str, list]:
    """WHERE clause matching the row only in an expected status (and owner)."""
    status_sql, status_params = in_clause(s.value for s in expected_statuses)
    where = f"id=%s AND status IN {status_sql}"
    params: list[object] = [str(log_id), *status_params]
    if owner_id is not None:
        where += " AND user_id=%s"
        params.append(str(owner_id))
    return where, params


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, log: WorkLog) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_logs(id, user_id, work_date, start_time, end_time, break_minutes, note, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    log.id,
                    log.owner_id,
                    log.work_date,
                    log.start_time,
                    log.end_time,
                    int(log.break_minutes),
                    log.note,
                    log.status.value,
                ),
            )

    def get(self, log_id: str) -> Optional[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM work_logs WHERE id=%s", (str(log_id),))
            r = fetchone(cur)
            return _row_to_log(r) if r else None

    def update(
        self,
        log_id: str,
        fields: Mapping[str, Any],
        *,
        expected_statuses: Iterable[WorkLogStatus],
        owner_id: Optional[str] = None,
    ) -> bool:
        assignments: list[str] = []
        params: list[object] = []
        for name, value in fields.items():
            column = _COLUMNS.get(name)
            if column is None:
                raise ValueError(f"Unknown work log field: {name}")
            assignments.append(f"{column}=%s")
            params.append(_to_db(value))

        where, where_params = _guard(log_id, expected_statuses, owner_id)

        with db_cursor(self._conn_factory) as (_, cur):
            if not assignments:
                # Nothing to write; still confirm the row is in the expected state.
                cur.execute(f"SELECT 1 AS found FROM work_logs WHERE {where}", tuple(where_params))
                return fetchone(cur) is not None
            cur.execute(
                f"UPDATE work_logs SET {', '.join(assignments)} WHERE {where}",
                tuple(params + where_params),
            )
            return cur.rowcount > 0

    def delete(
        self,
        log_id: str,
        *,
        expected_statuses: Iterable[WorkLogStatus],
        owner_id: Optional[str] = None,
    ) -> bool:
        where, params = _guard(log_id, expected_statuses, owner_id)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM work_logs WHERE {where}", tuple(params))
            return cur.rowcount > 0

    def list(
        self,
        *,
        owner_id: Optional[str] = None,
        status: Optional[WorkLogStatus] = None,
        since: Optional[date] = None,
    ) -> Sequence[WorkLog]:
        clauses = ["1=1"]
        params: list[object] = []

        if owner_id is not None:
            clauses.append("user_id=%s")
            params.append(str(owner_id))
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)
        if since is not None:
            clauses.append("work_date>=%s")
            params.append(since)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SELECT_COLUMNS}
                FROM work_logs
                WHERE {where}
                ORDER BY work_date DESC, start_time DESC
                """,
                tuple(params),
            )
            return [_row_to_log(r) for r in fetchall(cur)]
