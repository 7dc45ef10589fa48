from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class Message:
    """A single chat line or spoken statement recovered from evidence.

    ``id`` is assigned per file by the extraction service and is not unique
    across a batch.
    """

    id: str
    sender_name: str = ""
    timestamp: str = ""
    text: str = ""
    is_violation: bool = False


@dataclass(frozen=True)
class Violation:
    """A flagged breach of labor law; ``type`` is the batch-wide dedup key."""

    type: str
    name: str = ""
    severity: Severity = Severity.MEDIUM
    description: str = ""
    law_article: str = ""
    evidence_quotes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class WageData:
    """Wage figures extracted from evidence; each scalar is independently optional."""

    base_salary: float | None = None
    overtime_hours: float | None = None
    period_start: str | None = None
    period_end: str | None = None
    missing_info: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class KeyStatement:
    speaker: str = ""
    text: str = ""
    timestamp_approximate: str = ""
    relevance_to_labor_law: str = ""


@dataclass(frozen=True)
class AudioAnalysis:
    """Transcript-level findings for an audio recording."""

    transcript: str = ""
    speakers: list[str] = field(default_factory=list)
    labor_keywords_found: list[str] = field(default_factory=list)
    key_statements: list[KeyStatement] = field(default_factory=list)


@dataclass(frozen=True)
class ExtractedRecord:
    """Typed view of one file's parsed extraction response."""

    messages: list[Message] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)
    wage_data: WageData = field(default_factory=WageData)
    audio_analysis: AudioAnalysis | None = None
