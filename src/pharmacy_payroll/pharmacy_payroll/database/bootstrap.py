from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.constants import DEFAULT_TAX_RATE
from ..core.enums import Role
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

DEMO_PROFILES = (
    # email, name, password, role, hourly_rate
    ("admin@jpharm.example", "Admin Demo", "admin123", Role.ADMIN, 0),
    ("manager@jpharm.example", "Manager Demo", "manager123", Role.MANAGER, 12000),
    ("staff@jpharm.example", "Staff Demo", "staff123", Role.STAFF, 10000),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _connection(db_config: dict) -> DatabaseConnection:
    return DatabaseConnection(DBConfig.from_dict(db_config))


def ensure_database_exists(db_config: dict) -> None:
    factory = _connection(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    sql = Path(schema_path).read_text(encoding="utf-8")
    sql = _strip_line_comments(_strip_create_db_and_use(sql))

    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("[db] schema applied from %s", schema_path)


def ensure_demo_profiles(db_config: dict) -> None:
    """Upsert demo accounts so a fresh database can be logged into."""

    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor(dictionary=True)
        for email, name, password, role, hourly_rate in DEMO_PROFILES:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT id FROM profiles WHERE email=%s", (email,))
            existing = cur.fetchone()
            if existing:
                cur.execute(
                    """
                    UPDATE profiles
                    SET name=%s, password_hash=%s, role=%s, is_active=1
                    WHERE email=%s
                    """,
                    (name, password_hash, role.value, email),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO profiles (id, email, name, role, is_active, hourly_rate, tax_rate, password_hash)
                    VALUES (%s, %s, %s, %s, 1, %s, %s, %s)
                    """,
                    (str(uuid.uuid4()), email, name, role.value, hourly_rate, DEFAULT_TAX_RATE, password_hash),
                )
        conn.commit()
    finally:
        conn.close()
    logger.info("[db] demo profiles ready")


def list_tables(db_config: dict) -> list[str]:
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
