import base64
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from app.config.settings import Settings


def _payload_bytes(part: dict[str, Any]) -> bytes:
    if part["type"] == "image_url":
        return base64.b64decode(part["image_url"]["url"].split(",", 1)[1])
    if part["type"] == "input_audio":
        return base64.b64decode(part["input_audio"]["data"])
    if part["type"] == "text":
        return part["text"].encode("utf-8")
    return base64.b64decode(part["file"]["file_data"].split(",", 1)[1])


def _completion(text: str) -> MagicMock:
    choice = MagicMock()
    choice.message.content = text
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture()
def gemini_settings() -> Settings:
    return Settings(
        extraction_provider="gemini",
        extraction_gemini_api_key="test-key",
        extraction_max_workers=4,
    )


@pytest.fixture()
def evidence_dir(tmp_path: Path) -> Path:
    """Three uploads in submission order: two screenshots and one recording."""
    (tmp_path / "kakao_1.png").write_bytes(b"screenshot-one")
    (tmp_path / "kakao_2.jpg").write_bytes(b"screenshot-two")
    (tmp_path / "call.m4a").write_bytes(b"recording")
    return tmp_path


@pytest.fixture()
def fake_provider() -> Callable[[dict[bytes, str | Exception], str], MagicMock]:
    """Build a stand-in for the openai SDK client.

    Extraction calls are answered by looking up the decoded payload bytes;
    text-only calls (drafting) get ``draft_response``.
    """

    def _build(by_payload: dict[bytes, str | Exception], draft_response: str) -> MagicMock:
        def create(**kwargs: Any) -> MagicMock:
            content = kwargs["messages"][0]["content"]
            if len(content) == 1:
                return _completion(draft_response)
            answer = by_payload[_payload_bytes(content[1])]
            if isinstance(answer, Exception):
                raise answer
            return _completion(answer)

        client = MagicMock()
        client.chat.completions.create.side_effect = create
        return client

    return _build
