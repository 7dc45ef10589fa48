from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class MediaKind(str, Enum):
    """Coarse evidence category; decides which instruction set a file gets."""

    IMAGE = "image"
    AUDIO = "audio"
    OTHER = "other"


_AUDIO_SUFFIXES = frozenset({".m4a", ".mp3", ".wav", ".ogg", ".aac", ".flac", ".webm"})
_IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".gif", ".webp", ".heic", ".bmp"})


@dataclass(frozen=True)
class EvidenceFile:
    """One user-submitted evidence file. Lives only for the request."""

    name: str
    content: bytes
    mime_type: str = ""

    @property
    def suffix(self) -> str:
        return PurePath(self.name).suffix.lower()

    @property
    def kind(self) -> MediaKind:
        mime = self.mime_type.lower()
        if mime.startswith("audio/") or mime.endswith("m4a") or self.suffix in _AUDIO_SUFFIXES:
            return MediaKind.AUDIO
        if mime.startswith("image/") or self.suffix in _IMAGE_SUFFIXES:
            return MediaKind.IMAGE
        return MediaKind.OTHER

    @property
    def size_bytes(self) -> int:
        return len(self.content)
