import base64
from typing import Any

import httpx
import openai

from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionError, ExtractionNetworkError

_AUDIO_FORMATS = {
    "audio/mpeg": "mp3",
    "audio/mp3": "mp3",
    "audio/wav": "wav",
    "audio/x-wav": "wav",
    "audio/wave": "wav",
    "audio/mp4": "m4a",
    "audio/m4a": "m4a",
    "audio/x-m4a": "m4a",
    "audio/aac": "aac",
    "audio/ogg": "ogg",
    "audio/flac": "flac",
}


def _data_url(payload: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def _audio_format(mime_type: str) -> str:
    mime = mime_type.lower()
    if mime in _AUDIO_FORMATS:
        return _AUDIO_FORMATS[mime]
    return mime.rsplit("/", 1)[-1] or "mp3"


def build_payload_part(payload: bytes, mime_type: str) -> dict[str, Any]:
    """Encode an evidence payload as a chat content part according to its MIME type."""
    mime = mime_type.lower()
    if mime.startswith("image/"):
        return {"type": "image_url", "image_url": {"url": _data_url(payload, mime)}}
    if mime.startswith("audio/") or mime.endswith("m4a"):
        return {
            "type": "input_audio",
            "input_audio": {
                "data": base64.b64encode(payload).decode("ascii"),
                "format": _audio_format(mime),
            },
        }
    if mime.startswith("text/"):
        return {"type": "text", "text": payload.decode("utf-8", errors="replace")}
    return {
        "type": "file",
        "file": {"filename": "evidence", "file_data": _data_url(payload, mime)},
    }


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible chat API (OpenAI, Gemini, etc.)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        payload: bytes | None = None,
        mime_type: str | None = None,
        json_output: bool = True,
    ) -> str:
        content: list[dict[str, Any]] = [{"type": "text", "text": instruction}]
        if payload is not None:
            content.append(build_payload_part(payload, mime_type or "application/octet-stream"))

        kwargs: dict[str, Any] = {}
        if json_output:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": content}],
                **kwargs,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ExtractionError("AI returned no choices")
        text = response.choices[0].message.content
        if text is None:
            raise ExtractionError("AI returned empty response")
        return text
