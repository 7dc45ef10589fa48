"""Coerces an untrusted parsed response into a typed ExtractedRecord.

Unlike a strict validator this never raises. The extraction service's
output shape is not stable, so every field is read as optional: wrong
types fall back to empty values and unusable list items are dropped.
"""

import math
import re
from typing import Any

from app.extraction.models import (
    AudioAnalysis,
    ExtractedRecord,
    KeyStatement,
    Message,
    Severity,
    Violation,
    WageData,
)

_SEVERITIES = {s.value.lower(): s for s in Severity}
_NUMBER_NOISE_RE = re.compile(r"[,\s원]")


def build_record(data: dict[str, Any]) -> ExtractedRecord:
    """Build an ExtractedRecord from one parsed extraction response."""
    return ExtractedRecord(
        messages=_build_messages(data.get("messages")),
        violations=_build_violations(data.get("violations")),
        wage_data=build_wage_data(data.get("wageData")),
        audio_analysis=_build_audio_analysis(data.get("audioAnalysis")),
    )


def _as_str(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return ""


def _str_list(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, str)]


def _as_number(raw: Any) -> float | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            finite = math.isfinite(raw)
        except OverflowError:
            # int beyond float range
            return None
        return raw if finite else None
    if isinstance(raw, str):
        cleaned = _NUMBER_NOISE_RE.sub("", raw)
        if not cleaned:
            return None
        try:
            value = float(cleaned)
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() else value
    return None


def _build_messages(raw: Any) -> list[Message]:
    if not isinstance(raw, list):
        return []
    return [_build_message(item) for item in raw if isinstance(item, dict)]


def _build_message(raw: dict[str, Any]) -> Message:
    return Message(
        id=_as_str(raw.get("id")),
        sender_name=_as_str(raw.get("senderName")),
        timestamp=_as_str(raw.get("timestamp")),
        text=_as_str(raw.get("text")),
        is_violation=raw.get("isViolation") is True,
    )


def _build_violations(raw: Any) -> list[Violation]:
    if not isinstance(raw, list):
        return []
    violations: list[Violation] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        vtype = item.get("type")
        # Without a type the entry cannot take part in batch-wide dedup.
        if not isinstance(vtype, str) or not vtype.strip():
            continue
        violations.append(
            Violation(
                type=vtype,
                name=_as_str(item.get("name")),
                severity=_build_severity(item.get("severity")),
                description=_as_str(item.get("description")),
                law_article=_as_str(item.get("lawArticle")),
                evidence_quotes=_str_list(item.get("evidenceQuotes")),
            )
        )
    return violations


def _build_severity(raw: Any) -> Severity:
    if isinstance(raw, str):
        return _SEVERITIES.get(raw.strip().lower(), Severity.MEDIUM)
    return Severity.MEDIUM


def build_wage_data(raw: Any) -> WageData:
    """Coerce a ``wageData`` object; anything that is not an object gives empty data."""
    if not isinstance(raw, dict):
        return WageData()
    return WageData(
        base_salary=_as_number(raw.get("baseSalary")),
        overtime_hours=_as_number(raw.get("overtimeHours")),
        period_start=_build_date(raw.get("periodStart")),
        period_end=_build_date(raw.get("periodEnd")),
        missing_info=_str_list(raw.get("missingInfo")),
    )


def _build_date(raw: Any) -> str | None:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return None


def _build_audio_analysis(raw: Any) -> AudioAnalysis | None:
    if not isinstance(raw, dict):
        return None
    statements = raw.get("key_statements")
    return AudioAnalysis(
        transcript=_as_str(raw.get("transcript")),
        speakers=_str_list(raw.get("speakers")),
        labor_keywords_found=_str_list(raw.get("labor_keywords_found")),
        key_statements=[
            _build_key_statement(item)
            for item in (statements if isinstance(statements, list) else [])
            if isinstance(item, dict)
        ],
    )


def _build_key_statement(raw: dict[str, Any]) -> KeyStatement:
    return KeyStatement(
        speaker=_as_str(raw.get("speaker")),
        text=_as_str(raw.get("text")),
        timestamp_approximate=_as_str(raw.get("timestamp_approximate")),
        relevance_to_labor_law=_as_str(raw.get("relevance_to_labor_law")),
    )
