import mimetypes
from pathlib import Path

from app.processor.exceptions import EvidenceFileError
from app.processor.models import EvidenceFile

_EXTRA_MIME_TYPES = {
    ".m4a": "audio/mp4",
    ".heic": "image/heic",
    ".webp": "image/webp",
}


def guess_mime_type(path: Path) -> str:
    """Guess a MIME type from the file suffix; empty string when unknown."""
    suffix = path.suffix.lower()
    if suffix in _EXTRA_MIME_TYPES:
        return _EXTRA_MIME_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or ""


class FileLoader:
    """Reads evidence files from local paths into EvidenceFile objects."""

    def load(self, path: Path) -> EvidenceFile:
        """Read one file.

        Raises:
            EvidenceFileError: if the path does not exist or cannot be read.
        """
        if not path.is_file():
            raise EvidenceFileError(f"Evidence file not found: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise EvidenceFileError(f"Failed to read evidence file {path}: {exc}") from exc
        return EvidenceFile(name=path.name, content=content, mime_type=guess_mime_type(path))

    def load_all(self, paths: list[Path]) -> list[EvidenceFile]:
        """Read files in the given order; submission order is preserved."""
        return [self.load(path) for path in paths]
