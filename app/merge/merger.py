"""Order-sensitive fold of per-file extraction results into one report.

Submission order decides every conflict: message order, which duplicate
violation survives, which file resolves each wage field, and which file
seeds the audio analysis.
"""

from dataclasses import replace
from typing import TypeVar

from app.extraction.models import (
    AudioAnalysis,
    ExtractedRecord,
    Message,
    Violation,
    WageData,
)
from app.logging.logger import Log
from app.merge.models import ConsolidatedReport

TRANSCRIPT_DELIMITER = "\n\n---\n\n"

T = TypeVar("T")


def _union(existing: list[str], incoming: list[str]) -> list[str]:
    """Deduplicated union keeping first-seen order."""
    return list(dict.fromkeys([*existing, *incoming]))


def _first_non_null(current: T | None, incoming: T | None) -> T | None:
    return current if current is not None else incoming


class ResultMerger:
    """Folds an ordered list of optional records into a ConsolidatedReport."""

    def merge(self, results: list[ExtractedRecord | None]) -> ConsolidatedReport:
        messages: list[Message] = []
        violations: list[Violation] = []
        seen_types: set[str] = set()
        wage_data = WageData()
        audio: AudioAnalysis | None = None

        for record in results:
            if record is None:
                continue

            messages.extend(record.messages)

            for violation in record.violations:
                if violation.type in seen_types:
                    continue
                seen_types.add(violation.type)
                violations.append(violation)

            wage_data = self.merge_wage_data(wage_data, record.wage_data)

            if record.audio_analysis is not None:
                audio = self.merge_audio(audio, record.audio_analysis)

        Log.info(
            f"Merged {sum(r is not None for r in results)}/{len(results)} results: "
            f"{len(messages)} messages, {len(violations)} violations"
        )
        return ConsolidatedReport(
            messages=messages,
            violations=violations,
            wage_data=wage_data,
            audio_analysis=audio,
        )

    @staticmethod
    def merge_wage_data(current: WageData, incoming: WageData) -> WageData:
        """Resolve each scalar independently; an already resolved field is never overwritten."""
        return WageData(
            base_salary=_first_non_null(current.base_salary, incoming.base_salary),
            overtime_hours=_first_non_null(current.overtime_hours, incoming.overtime_hours),
            period_start=_first_non_null(current.period_start, incoming.period_start),
            period_end=_first_non_null(current.period_end, incoming.period_end),
            missing_info=_union(current.missing_info, incoming.missing_info),
        )

    @staticmethod
    def merge_audio(current: AudioAnalysis | None, incoming: AudioAnalysis) -> AudioAnalysis:
        if current is None:
            return replace(
                incoming,
                speakers=list(incoming.speakers),
                labor_keywords_found=list(incoming.labor_keywords_found),
                key_statements=list(incoming.key_statements),
            )
        return AudioAnalysis(
            transcript=current.transcript + TRANSCRIPT_DELIMITER + incoming.transcript,
            speakers=_union(current.speakers, incoming.speakers),
            labor_keywords_found=_union(
                current.labor_keywords_found, incoming.labor_keywords_found
            ),
            key_statements=[*current.key_statements, *incoming.key_statements],
        )
