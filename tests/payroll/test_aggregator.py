import pytest

from src.pharmacy_payroll.pharmacy_payroll.payroll.aggregator import aggregate
from src.pharmacy_payroll.pharmacy_payroll.payroll.calculator.base import PayrollCalculator
from src.pharmacy_payroll.pharmacy_payroll.payroll.model import PayConfig
from tests.fakes import make_log

PAY = PayConfig(hourly_rate=10000, tax_rate=0.033)


def test_single_eight_hour_shift():
    summary = aggregate([make_log()], PAY)

    assert summary.total_worked_minutes == 480
    assert summary.total_hours == pytest.approx(8.0)
    assert summary.gross_pay == pytest.approx(80000)
    assert summary.net_pay == pytest.approx(77360)


def test_empty_input_is_all_zero():
    summary = aggregate([], PAY)

    assert summary.total_worked_minutes == 0
    assert summary.gross_pay == 0
    assert summary.net_pay == 0


def test_malformed_or_non_positive_shifts_are_skipped():
    logs = [
        make_log("a"),
        make_log("bad", start_time="bad"),
        make_log("zero", start_time="09:00", end_time="10:00", break_minutes=60),
        make_log("reversed", start_time="18:00", end_time="09:00", break_minutes=0),
    ]

    assert aggregate(logs, PAY).total_worked_minutes == 480


def test_one_minute_shift_counts():
    log = make_log(start_time="09:00", end_time="10:00", break_minutes=59)

    assert aggregate([log], PAY).total_worked_minutes == 1


def test_order_does_not_matter():
    logs = [
        make_log("a", start_time="08:00", end_time="12:15", break_minutes=0),
        make_log("b", start_time="13:00", end_time="19:40", break_minutes=20),
        make_log("c"),
    ]

    forward = aggregate(logs, PAY)
    backward = aggregate(list(reversed(logs)), PAY)

    assert forward == backward
    assert forward.total_worked_minutes == 255 + 380 + 480


def test_zero_rate_and_no_tax():
    summary = aggregate([make_log()], PayConfig(hourly_rate=0, tax_rate=0))
    assert summary.gross_pay == 0

    summary = aggregate([make_log()], PayConfig(hourly_rate=9860, tax_rate=0))
    assert summary.net_pay == pytest.approx(summary.gross_pay)


def test_custom_calculator_is_used():
    class FlatCalculator(PayrollCalculator):
        def worked_minutes(self, log):
            return 30

    summary = aggregate([make_log("a"), make_log("b")], PAY, calculator=FlatCalculator())

    assert summary.total_worked_minutes == 60
    assert summary.gross_pay == pytest.approx(10000)
