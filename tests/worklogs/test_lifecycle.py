from datetime import date, datetime

import pytest

from src.pharmacy_payroll.pharmacy_payroll.core.enums import Role, WorkLogStatus
from src.pharmacy_payroll.pharmacy_payroll.core.exceptions import (
    AuthorizationError,
    InvalidStateError,
    ValidationError,
)
from src.pharmacy_payroll.pharmacy_payroll.worklogs.lifecycle import (
    approve_work_log,
    check_deletable,
    create_work_log,
    edit_work_log,
    reject_work_log,
    submit_work_log,
)
from src.pharmacy_payroll.pharmacy_payroll.worklogs.model import Actor, WorkLogEntry
from tests.fakes import make_log

OWNER = Actor(user_id="staff", role=Role.STAFF)
OTHER = Actor(user_id="other", role=Role.STAFF)
MANAGER = Actor(user_id="manager", role=Role.MANAGER)
NOW = datetime(2026, 10, 2, 12, 0)

ENTRY = WorkLogEntry(work_date="2026-10-03", start_time="10:00", end_time="19:00:00", break_minutes=30, note=" night ")


def test_create_starts_as_draft_owned_by_caller():
    log = create_work_log(OWNER, ENTRY)

    assert log.status == WorkLogStatus.DRAFT
    assert log.owner_id == "staff"
    assert log.id
    assert log.work_date == date(2026, 10, 3)
    assert log.end_time == "19:00"
    assert log.note == "night"
    assert log.reviewer_id is None and log.reviewed_at is None


def test_create_assigns_unique_ids():
    assert create_work_log(OWNER, ENTRY).id != create_work_log(OWNER, ENTRY).id


@pytest.mark.parametrize(
    "entry",
    [
        WorkLogEntry(work_date="", start_time="09:00", end_time="18:00"),
        WorkLogEntry(work_date="2026-10-01", start_time="", end_time="18:00"),
        WorkLogEntry(work_date="2026-10-01", start_time="09:00", end_time=None),
        WorkLogEntry(work_date="01/10/2026", start_time="09:00", end_time="18:00"),
        WorkLogEntry(work_date="2026-10-01", start_time="bad", end_time="18:00"),
        WorkLogEntry(work_date="2026-10-01", start_time="09:00", end_time="18:00", break_minutes=-5),
        WorkLogEntry(work_date="2026-10-01", start_time="09:00", end_time="18:00", break_minutes="abc"),
    ],
)
def test_create_rejects_missing_or_malformed_fields(entry):
    with pytest.raises(ValidationError):
        create_work_log(OWNER, entry)


def test_blank_break_counts_as_zero():
    log = create_work_log(OWNER, WorkLogEntry(work_date=date(2026, 10, 1), start_time="09:00", end_time="18:00", break_minutes=""))
    assert log.break_minutes == 0


@pytest.mark.parametrize("status", [WorkLogStatus.DRAFT, WorkLogStatus.REJECTED])
def test_owner_can_edit_and_delete_owner_mutable_states(status):
    log = make_log(status=status)

    edited = edit_work_log(log, OWNER, ENTRY)
    check_deletable(log, OWNER)

    assert edited.status == WorkLogStatus.DRAFT
    assert edited.start_time == "10:00"
    assert edited.break_minutes == 30
    assert edited.id == log.id and edited.owner_id == log.owner_id


@pytest.mark.parametrize("status", [WorkLogStatus.SUBMITTED, WorkLogStatus.APPROVED])
def test_edit_submit_delete_refused_once_frozen(status):
    log = make_log(status=status)

    with pytest.raises(InvalidStateError):
        edit_work_log(log, OWNER, ENTRY)
    with pytest.raises(InvalidStateError):
        submit_work_log(log, OWNER)
    with pytest.raises(InvalidStateError):
        check_deletable(log, OWNER)


def test_non_owner_cannot_touch_a_draft():
    log = make_log()

    with pytest.raises(AuthorizationError):
        edit_work_log(log, OTHER, ENTRY)
    with pytest.raises(AuthorizationError):
        submit_work_log(log, MANAGER)
    with pytest.raises(AuthorizationError):
        check_deletable(log, OTHER)


def test_reedit_of_rejected_resets_to_draft_and_clears_reason():
    log = make_log(status=WorkLogStatus.REJECTED, reject_reason="wrong date", reviewer_id="manager", reviewed_at=NOW)

    edited = edit_work_log(log, OWNER, ENTRY)

    assert edited.status == WorkLogStatus.DRAFT
    assert edited.reject_reason is None


@pytest.mark.parametrize("status", [WorkLogStatus.DRAFT, WorkLogStatus.REJECTED])
def test_submit_always_yields_submitted_and_changes_nothing_else(status):
    log = make_log(status=status, note="keep")

    submitted = submit_work_log(log, OWNER)

    assert submitted.status == WorkLogStatus.SUBMITTED
    assert submitted == make_log(status=WorkLogStatus.SUBMITTED, note="keep")


def test_approve_sets_reviewer_and_clears_reason():
    log = make_log(status=WorkLogStatus.SUBMITTED, reject_reason="old")

    approved = approve_work_log(log, MANAGER, now=NOW)

    assert approved.status == WorkLogStatus.APPROVED
    assert approved.reviewer_id == "manager"
    assert approved.reviewed_at == NOW
    assert approved.reject_reason is None


@pytest.mark.parametrize("reason, stored", [("  overlap  ", "overlap"), ("", None), (None, None)])
def test_reject_records_reviewer_and_optional_reason(reason, stored):
    log = make_log(status=WorkLogStatus.SUBMITTED)

    rejected = reject_work_log(log, MANAGER, now=NOW, reason=reason)

    assert rejected.status == WorkLogStatus.REJECTED
    assert rejected.reviewer_id == "manager"
    assert rejected.reviewed_at == NOW
    assert rejected.reject_reason == stored


@pytest.mark.parametrize("status", [WorkLogStatus.DRAFT, WorkLogStatus.APPROVED, WorkLogStatus.REJECTED])
def test_review_only_from_submitted(status):
    log = make_log(status=status)

    with pytest.raises(InvalidStateError):
        approve_work_log(log, MANAGER, now=NOW)
    with pytest.raises(InvalidStateError):
        reject_work_log(log, MANAGER, now=NOW)
    assert log.status == status


def test_staff_cannot_review():
    log = make_log(owner_id="other", status=WorkLogStatus.SUBMITTED)

    with pytest.raises(AuthorizationError):
        approve_work_log(log, OWNER, now=NOW)
    with pytest.raises(AuthorizationError):
        reject_work_log(log, OWNER, now=NOW)


def test_admin_is_a_reviewer():
    admin = Actor(user_id="admin", role=Role.ADMIN)
    log = make_log(status=WorkLogStatus.SUBMITTED)

    assert approve_work_log(log, admin, now=NOW).reviewer_id == "admin"
