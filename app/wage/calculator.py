"""Statutory overtime, night, and holiday premium calculation (Labor Standards Act).

Every named amount is floored on its own before it is summed; flooring only
the grand total gives different results.
"""

import math

from app.wage.models import WageBreakdown, WageInputs

MONTHLY_STANDARD_HOURS = 209
OVERTIME_RATE = 1.5
NIGHT_PREMIUM_RATE = 0.5
HOLIDAY_RATE_WITHIN_8H = 1.5
HOLIDAY_RATE_OVER_8H = 2.0
HOLIDAY_THRESHOLD_HOURS = 8


def _hours(value: float | None) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        return 0
    return value


def calc_wage(inputs: WageInputs) -> WageBreakdown | None:
    """Compute the premium pay breakdown, or None without a usable base salary."""
    base = inputs.base_salary
    if base is None or not math.isfinite(base) or base <= 0:
        return None

    hourly_wage = math.floor(base / MONTHLY_STANDARD_HOURS)
    overtime = _hours(inputs.overtime_hours)
    night = _hours(inputs.night_hours)
    holiday = _hours(inputs.holiday_hours)

    overtime_pay = math.floor(hourly_wage * OVERTIME_RATE * overtime)
    # Additive on top of any overtime premium for the same hours.
    night_pay = math.floor(hourly_wage * NIGHT_PREMIUM_RATE * night)

    holiday_first8 = min(holiday, HOLIDAY_THRESHOLD_HOURS)
    holiday_extra = max(holiday - HOLIDAY_THRESHOLD_HOURS, 0)
    holiday_pay_first8 = math.floor(hourly_wage * HOLIDAY_RATE_WITHIN_8H * holiday_first8)
    holiday_pay_extra = math.floor(hourly_wage * HOLIDAY_RATE_OVER_8H * holiday_extra)
    total_holiday_pay = holiday_pay_first8 + holiday_pay_extra

    return WageBreakdown(
        hourly_wage=hourly_wage,
        overtime_pay=overtime_pay,
        night_pay=night_pay,
        holiday_pay_first8=holiday_pay_first8,
        holiday_pay_extra=holiday_pay_extra,
        total_holiday_pay=total_holiday_pay,
        total=overtime_pay + night_pay + total_holiday_pay,
    )
