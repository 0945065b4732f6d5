from datetime import datetime
from decimal import Decimal

from calong_tick.payroll.calculator.standard_calculator import StandardDurationCalculator
from calong_tick.payroll.money import estimated_pay, hours_decimal


def test_eight_and_a_half_hours():
    calc = StandardDurationCalculator()
    worked = calc.calculate(datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 17, 30))

    assert worked.total_minutes == 510
    assert (worked.hours, worked.minutes) == (8, 30)
    assert worked.hours_decimal == Decimal("8.50")
    assert worked.label == "8h 30m"


def test_break_is_subtracted():
    calc = StandardDurationCalculator()
    worked = calc.calculate(datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 17, 30), 30)

    assert worked.total_minutes == 480
    assert worked.hours_decimal == Decimal("8.00")


def test_partial_minutes_are_truncated():
    calc = StandardDurationCalculator()
    worked = calc.calculate(datetime(2024, 3, 4, 9, 0, 0), datetime(2024, 3, 4, 9, 1, 59))

    assert worked.total_minutes == 1


def test_never_negative():
    calc = StandardDurationCalculator()

    reversed_times = calc.calculate(datetime(2024, 3, 4, 17, 0), datetime(2024, 3, 4, 9, 0))
    long_break = calc.calculate(datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 9, 20), 45)

    assert reversed_times.total_minutes == 0
    assert reversed_times.hours_decimal == Decimal("0.00")
    assert long_break.total_minutes == 0


def test_overnight_shift():
    calc = StandardDurationCalculator()
    worked = calc.calculate(datetime(2024, 3, 4, 22, 0), datetime(2024, 3, 5, 2, 15))

    assert worked.label == "4h 15m"


def test_money_rounds_half_up():
    # 1 minute = 0.01666.. hours -> 0.02
    assert hours_decimal(1) == Decimal("0.02")
    assert hours_decimal(0) == Decimal("0.00")
    assert estimated_pay(90, Decimal("15.00")) == Decimal("22.50")
    # 10 minutes at 0.03/h = 0.005 -> 0.01
    assert estimated_pay(10, Decimal("0.03")) == Decimal("0.01")
