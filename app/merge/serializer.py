from typing import Any

from app.extraction.models import AudioAnalysis, KeyStatement, Message, Violation, WageData
from app.merge.models import ConsolidatedReport


class ReportSerializer:
    """Converts a ConsolidatedReport into the camelCase JSON wire structure."""

    def to_payload(self, report: ConsolidatedReport) -> dict[str, Any]:
        """Build the response dict.

        ``audioAnalysis`` is omitted entirely (not null) when the report has none.
        """
        payload: dict[str, Any] = {
            "messages": [self.message_to_dict(m) for m in report.messages],
            "violations": [self.violation_to_dict(v) for v in report.violations],
            "wageData": self.wage_data_to_dict(report.wage_data),
        }
        if report.audio_analysis is not None:
            payload["audioAnalysis"] = self._audio_to_dict(report.audio_analysis)
        return payload

    @staticmethod
    def message_to_dict(message: Message) -> dict[str, Any]:
        return {
            "id": message.id,
            "senderName": message.sender_name,
            "timestamp": message.timestamp,
            "text": message.text,
            "isViolation": message.is_violation,
        }

    @staticmethod
    def violation_to_dict(violation: Violation) -> dict[str, Any]:
        return {
            "type": violation.type,
            "name": violation.name,
            "severity": violation.severity.value,
            "description": violation.description,
            "lawArticle": violation.law_article,
            "evidenceQuotes": list(violation.evidence_quotes),
        }

    @staticmethod
    def wage_data_to_dict(wage_data: WageData) -> dict[str, Any]:
        return {
            "baseSalary": wage_data.base_salary,
            "overtimeHours": wage_data.overtime_hours,
            "periodStart": wage_data.period_start,
            "periodEnd": wage_data.period_end,
            "missingInfo": list(wage_data.missing_info),
        }

    def _audio_to_dict(self, audio: AudioAnalysis) -> dict[str, Any]:
        return {
            "transcript": audio.transcript,
            "speakers": list(audio.speakers),
            "labor_keywords_found": list(audio.labor_keywords_found),
            "key_statements": [self._statement_to_dict(s) for s in audio.key_statements],
        }

    @staticmethod
    def _statement_to_dict(statement: KeyStatement) -> dict[str, str]:
        return {
            "speaker": statement.speaker,
            "text": statement.text,
            "timestamp_approximate": statement.timestamp_approximate,
            "relevance_to_labor_law": statement.relevance_to_labor_law,
        }
