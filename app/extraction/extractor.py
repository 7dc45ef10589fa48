"""Per-file call to the generative extraction service."""

from pathlib import Path

from app.extraction.client_base import BaseExtractionClient
from app.extraction.prompt_loader import AUDIO_PROMPT, IMAGE_PROMPT, load_prompt
from app.logging.logger import Log
from app.processor.models import EvidenceFile, MediaKind

# Sent when the upload carried no MIME type at all.
DEFAULT_MIME_TYPE = "audio/mp3"


class Extractor:
    """Sends one evidence file with its kind-specific instruction set and returns raw text."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.2,
        image_prompt_path: Path | None = None,
        audio_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._image_prompt = load_prompt(IMAGE_PROMPT, image_prompt_path)
        self._audio_prompt = load_prompt(AUDIO_PROMPT, audio_prompt_path)

    @property
    def client(self) -> BaseExtractionClient:
        return self._client

    @property
    def model(self) -> str:
        return self._model

    @property
    def temperature(self) -> float:
        return self._temperature

    def instruction_for(self, file: EvidenceFile) -> str:
        """Audio gets the three-part instruction; every other kind the two-part one."""
        if file.kind is MediaKind.AUDIO:
            return self._audio_prompt
        return self._image_prompt

    def extract(self, file: EvidenceFile, file_index: int) -> str:
        """Run the extraction call for one file.

        Raises:
            ExtractionError: on any provider failure; callers isolate it per file.
        """
        Log.debug(
            f"Extracting file #{file_index} '{file.name}' as {file.kind.value} "
            f"({file.size_bytes} bytes)"
        )
        raw = self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            instruction=self.instruction_for(file),
            payload=file.content,
            mime_type=file.mime_type or DEFAULT_MIME_TYPE,
            json_output=True,
        )
        Log.info(f"File #{file_index} '{file.name}': received {len(raw)} chars")
        return raw
