from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Profile
from .repository import ProfileRepository

_SELECT_COLUMNS = "id, email, name, role, is_active, hourly_rate, tax_rate, password_hash"

_UPDATABLE = frozenset({"name", "role", "is_active", "hourly_rate", "tax_rate", "password_hash"})


def _row_to_profile(r: dict) -> Profile:
    return Profile(
        id=str(r["id"]),
        email=r["email"],
        name=r.get("name"),
        role=Role(r["role"]),
        is_active=bool(r.get("is_active", True)),
        hourly_rate=float(r.get("hourly_rate") or 0),
        tax_rate=float(r.get("tax_rate") or 0),
        password_hash=r.get("password_hash") or "",
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM profiles WHERE id=%s", (str(user_id),))
            row = fetchone(cur)
            return _row_to_profile(row) if row else None

    def get_by_email(self, email: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM profiles WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_profile(row) if row else None

    def get_many(self, user_ids: Iterable[str]) -> Sequence[Profile]:
        ids = sorted({str(i) for i in user_ids})
        if not ids:
            return []
        id_sql, params = in_clause(ids)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM profiles WHERE id IN {id_sql}", tuple(params))
            return [_row_to_profile(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM profiles ORDER BY role ASC, email ASC")
            return [_row_to_profile(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        user_id: str,
        email: str,
        name: Optional[str],
        role: Role,
        password_hash: str,
        hourly_rate: float = 0.0,
        tax_rate: float = 0.0,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO profiles(id, email, name, role, is_active, hourly_rate, tax_rate, password_hash)
                VALUES(%s,%s,%s,%s,1,%s,%s,%s)
                """,
                (str(user_id), email, name, role.value, hourly_rate, tax_rate, password_hash),
            )

    def update(self, user_id: str, fields: Mapping[str, Any]) -> bool:
        unknown = set(fields) - _UPDATABLE
        if unknown:
            raise ValueError(f"Unknown profile fields: {sorted(unknown)}")
        if not fields:
            return True

        assignments = [f"{name}=%s" for name in fields]
        params = [v.value if isinstance(v, Role) else v for v in fields.values()]
        params.append(str(user_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE profiles SET {', '.join(assignments)} WHERE id=%s", tuple(params))
            return cur.rowcount > 0
