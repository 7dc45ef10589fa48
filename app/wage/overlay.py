import math
from dataclasses import dataclass, field
from typing import Any

from app.extraction.models import WageData
from app.wage.models import WageBreakdown, WageInputs


@dataclass(frozen=True)
class DraftWageData:
    """Merged wage data with the user's edits and the computed total layered on top."""

    base_salary: float | None = None
    overtime_hours: float | None = None
    night_hours: float | None = None
    holiday_hours: float | None = None
    period_start: str | None = None
    period_end: str | None = None
    missing_info: list[str] = field(default_factory=list)
    calculated_amount: int = 0

    def to_payload(self) -> dict[str, Any]:
        return {
            "baseSalary": self.base_salary,
            "overtimeHours": self.overtime_hours,
            "nightHours": self.night_hours,
            "holidayHours": self.holiday_hours,
            "periodStart": self.period_start,
            "periodEnd": self.period_end,
            "missingInfo": list(self.missing_info),
            "calculatedAmount": self.calculated_amount,
        }


def _edited(value: float | None) -> float | None:
    """A zero, absent or non-finite edit means the user left the field blank."""
    return value if value and math.isfinite(value) else None


def overlay_wage_inputs(
    wage_data: WageData,
    inputs: WageInputs | None,
    breakdown: WageBreakdown | None,
) -> DraftWageData:
    """Layer user edits over the merged wage data without mutating either."""
    inputs = inputs or WageInputs()
    base_salary = _edited(inputs.base_salary)
    overtime_hours = _edited(inputs.overtime_hours)
    return DraftWageData(
        base_salary=base_salary if base_salary is not None else wage_data.base_salary,
        overtime_hours=(
            overtime_hours if overtime_hours is not None else wage_data.overtime_hours
        ),
        night_hours=_edited(inputs.night_hours),
        holiday_hours=_edited(inputs.holiday_hours),
        period_start=wage_data.period_start,
        period_end=wage_data.period_end,
        missing_info=list(wage_data.missing_info),
        calculated_amount=breakdown.total if breakdown is not None else 0,
    )
