from datetime import date

import pytest

from src.pharmacy_payroll.pharmacy_payroll.core.enums import Role, WorkLogStatus
from src.pharmacy_payroll.pharmacy_payroll.core.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.pharmacy_payroll.pharmacy_payroll.payroll.service import PayrollService
from src.pharmacy_payroll.pharmacy_payroll.worklogs.model import Actor
from tests.fakes import InMemoryProfiles, InMemoryWorkLogs, make_log, make_profile

TODAY = date(2026, 10, 19)

STAFF = Actor(user_id="staff", role=Role.STAFF)
MANAGER = Actor(user_id="manager", role=Role.MANAGER)


def _service(*logs):
    profiles = InMemoryProfiles([
        make_profile("staff"),
        make_profile("other", hourly_rate=12000, tax_rate=0),
        make_profile("manager", Role.MANAGER),
    ])
    return PayrollService(InMemoryWorkLogs(logs), profiles)


def test_only_approved_logs_in_window_are_counted():
    svc = _service(
        make_log("in", status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 15)),
        make_log("edge", status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 12)),
        make_log("too-old", status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 11)),
        make_log("submitted", status=WorkLogStatus.SUBMITTED, work_date=date(2026, 10, 15)),
        make_log("draft", work_date=date(2026, 10, 15)),
    )

    report = svc.summary_for(STAFF, days=7, today=TODAY)

    assert report.period_start == date(2026, 10, 12)
    assert report.period_end == TODAY
    assert report.log_count == 2
    assert report.summary.total_worked_minutes == 960
    assert report.summary.net_pay == pytest.approx(2 * 77360)


def test_default_period_is_thirty_days():
    svc = _service(make_log(status=WorkLogStatus.APPROVED, work_date=date(2026, 9, 20)))

    report = svc.summary_for(STAFF, today=TODAY)

    assert report.days == 30
    assert report.log_count == 1


@pytest.mark.parametrize("days", [0, 1, 31, 90, -7])
def test_unsupported_period_is_rejected(days):
    with pytest.raises(ValidationError):
        _service().summary_for(STAFF, days=days, today=TODAY)


def test_other_users_logs_are_not_mixed_in():
    svc = _service(
        make_log("mine", status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 15)),
        make_log("theirs", owner_id="other", status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 15)),
    )

    report = svc.summary_for(MANAGER, user_id="other", today=TODAY)

    assert report.user_id == "other"
    assert report.log_count == 1
    assert report.summary.gross_pay == pytest.approx(96000)
    assert report.summary.net_pay == pytest.approx(96000)


def test_staff_cannot_view_someone_else():
    with pytest.raises(AuthorizationError):
        _service().summary_for(STAFF, user_id="other", today=TODAY)


def test_unknown_user_is_not_found():
    with pytest.raises(NotFoundError):
        _service().summary_for(MANAGER, user_id="ghost", today=TODAY)


def test_report_display_values():
    svc = _service(make_log(status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 15)))

    data = svc.summary_for(STAFF, today=TODAY).to_dict()

    assert data["display"] == {"worked": "8시간 0분", "gross_pay": "80,000원", "net_pay": "77,360원"}
    assert data["period_start"] == "2026-09-19"


def test_report_lists_each_approved_log_with_its_minutes():
    svc = _service(
        make_log("long", status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 16)),
        make_log("bad", status=WorkLogStatus.APPROVED, work_date=date(2026, 10, 15), start_time="bad"),
        make_log("draft", work_date=date(2026, 10, 17)),
    )

    report = svc.summary_for(STAFF, today=TODAY)

    assert [(line.log.id, line.worked_minutes) for line in report.lines] == [("long", 480), ("bad", 0)]
    assert report.log_count == 2

    logs = report.to_dict()["logs"]
    assert [row["id"] for row in logs] == ["long", "bad"]
    assert logs[0]["work_date"] == "2026-10-16"
    assert logs[0]["start_time"] == "09:00" and logs[0]["end_time"] == "18:00"
    assert logs[0]["worked"] == "8시간 0분"
