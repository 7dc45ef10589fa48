import json
from collections.abc import Callable

import pytest

from app.processor.models import EvidenceFile


@pytest.fixture()
def image_file() -> EvidenceFile:
    """A chat screenshot upload (content is irrelevant to the pipeline)."""
    return EvidenceFile(name="kakao_1.png", content=b"\x89PNG-fake", mime_type="image/png")


@pytest.fixture()
def audio_file() -> EvidenceFile:
    """A phone recording uploaded with an m4a suffix and no declared MIME type."""
    return EvidenceFile(name="call.m4a", content=b"fake-audio", mime_type="")


@pytest.fixture()
def text_file() -> EvidenceFile:
    return EvidenceFile(name="notes.txt", content="야근 기록".encode(), mime_type="text/plain")


@pytest.fixture()
def extraction_json() -> Callable[..., str]:
    """Build a raw extraction response string with sensible defaults."""

    def _build(
        messages: list[dict[str, object]] | None = None,
        violations: list[dict[str, object]] | None = None,
        wage_data: dict[str, object] | None = None,
        audio_analysis: dict[str, object] | None = None,
    ) -> str:
        payload: dict[str, object] = {
            "messages": messages or [],
            "violations": violations or [],
            "wageData": wage_data
            or {
                "baseSalary": None,
                "overtimeHours": None,
                "periodStart": None,
                "periodEnd": None,
                "missingInfo": [],
            },
        }
        if audio_analysis is not None:
            payload["audioAnalysis"] = audio_analysis
        return json.dumps(payload, ensure_ascii=False)

    return _build
