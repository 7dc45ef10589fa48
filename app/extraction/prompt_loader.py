from pathlib import Path

from app.extraction.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

IMAGE_PROMPT = "image_prompt.txt"
AUDIO_PROMPT = "audio_prompt.txt"
COMPLAINT_PROMPT = "complaint_prompt.txt"


def load_prompt(name: str, path: Path | None = None) -> str:
    """Load an instruction template.

    Args:
        name: File name of a bundled template under ``prompts/``.
        path: Explicit template path; overrides ``name`` when given.

    Returns:
        The raw template text.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc
