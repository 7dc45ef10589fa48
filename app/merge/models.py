from dataclasses import dataclass, field

from app.extraction.models import AudioAnalysis, Message, Violation, WageData


@dataclass(frozen=True)
class ConsolidatedReport:
    """Single report folded from every file of one batch.

    ``violations`` holds at most one entry per ``type``; ``audio_analysis``
    is None when no file contributed one.
    """

    messages: list[Message] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)
    wage_data: WageData = field(default_factory=WageData)
    audio_analysis: AudioAnalysis | None = None
