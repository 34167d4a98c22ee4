from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from werkzeug.security import generate_password_hash

from src.pharmacy_payroll.pharmacy_payroll.core.enums import Role, WorkLogStatus
from src.pharmacy_payroll.pharmacy_payroll.profiles.model import Profile
from src.pharmacy_payroll.pharmacy_payroll.worklogs.model import WorkLog


class InMemoryWorkLogs:
    def __init__(self, logs=()):
        self._logs: dict[str, WorkLog] = {log.id: log for log in logs}
        self.update_calls: list[dict] = []

    def create(self, log):
        self._logs[log.id] = log

    def get(self, log_id):
        return self._logs.get(str(log_id))

    def update(self, log_id, fields, *, expected_statuses, owner_id=None):
        self.update_calls.append({"log_id": log_id, "fields": dict(fields), "owner_id": owner_id})
        log = self._logs.get(str(log_id))
        if not log or log.status not in set(expected_statuses):
            return False
        if owner_id is not None and log.owner_id != owner_id:
            return False
        self._logs[log.id] = replace(log, **fields)
        return True

    def delete(self, log_id, *, expected_statuses, owner_id=None):
        log = self._logs.get(str(log_id))
        if not log or log.status not in set(expected_statuses):
            return False
        if owner_id is not None and log.owner_id != owner_id:
            return False
        del self._logs[log.id]
        return True

    def list(self, *, owner_id=None, status=None, since: Optional[date] = None):
        items = [
            log
            for log in self._logs.values()
            if (owner_id is None or log.owner_id == owner_id)
            and (status is None or log.status == status)
            and (since is None or log.work_date >= since)
        ]
        items.sort(key=lambda log: (log.work_date, log.start_time), reverse=True)
        return items

    def force_status(self, log_id, status: WorkLogStatus):
        """Simulate another writer changing the row behind the service's back."""
        self._logs[log_id] = replace(self._logs[log_id], status=status)


class InMemoryProfiles:
    def __init__(self, profiles=()):
        self._profiles: dict[str, Profile] = {p.id: p for p in profiles}

    def get_by_id(self, user_id):
        return self._profiles.get(str(user_id))

    def get_by_email(self, email):
        for p in self._profiles.values():
            if p.email == email:
                return p
        return None

    def get_many(self, user_ids):
        return [self._profiles[i] for i in user_ids if i in self._profiles]

    def list_all(self):
        return sorted(self._profiles.values(), key=lambda p: (p.role.value, p.email))

    def create(self, *, user_id, email, name, role, password_hash, hourly_rate=0.0, tax_rate=0.0):
        self._profiles[user_id] = Profile(
            id=user_id,
            email=email,
            name=name,
            role=role,
            hourly_rate=hourly_rate,
            tax_rate=tax_rate,
            password_hash=password_hash,
        )

    def update(self, user_id, fields):
        p = self._profiles.get(str(user_id))
        if not p:
            return False
        self._profiles[p.id] = replace(p, **fields)
        return True


def make_profile(user_id, role=Role.STAFF, *, password="secret123", **overrides) -> Profile:
    data = dict(
        id=user_id,
        email=f"{user_id}@jpharm.example",
        name=user_id.title(),
        role=role,
        is_active=True,
        hourly_rate=10000.0,
        tax_rate=0.033,
        password_hash=generate_password_hash(password, method="pbkdf2:sha256:1000"),
    )
    data.update(overrides)
    return Profile(**data)


def make_log(log_id="log-1", owner_id="staff", status=WorkLogStatus.DRAFT, **overrides) -> WorkLog:
    data = dict(
        id=log_id,
        owner_id=owner_id,
        work_date=date(2026, 10, 1),
        start_time="09:00",
        end_time="18:00",
        break_minutes=60,
        status=status,
    )
    data.update(overrides)
    return WorkLog(**data)
