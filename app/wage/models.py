from dataclasses import dataclass


@dataclass(frozen=True)
class WageInputs:
    """User-edited figures; independent of the merged report's wage data."""

    base_salary: float | None = None
    overtime_hours: float | None = None
    night_hours: float | None = None
    holiday_hours: float | None = None


@dataclass(frozen=True)
class WageBreakdown:
    """Statutory premium pay, in whole won."""

    hourly_wage: int
    overtime_pay: int
    night_pay: int
    holiday_pay_first8: int
    holiday_pay_extra: int
    total_holiday_pay: int
    total: int
