from typing import Any, ClassVar

from app.config.settings import Settings
from app.extraction.client_base import BaseExtractionClient
from app.extraction.example_client_adapter import ExampleClientAdapter
from app.extraction.exceptions import ExtractionConfigError
from app.extraction.extractor import Extractor
from app.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractorFactory:
    """Creates the configured extraction client and extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    # Local servers accept any key.
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> Extractor:
        """Create a configured extractor from application settings.

        Raises:
            ValueError: for an unknown provider name.
            ExtractionConfigError: when the provider has no API key or model configured.
        """
        provider = settings.extraction_provider.lower()
        return Extractor(
            client=cls.create_client(settings),
            model=cls.resolve_model_name(provider, settings),
            temperature=cls.resolve_temperature(provider, settings),
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseExtractionClient:
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key and provider not in cls.KEYLESS_PROVIDERS:
            raise ExtractionConfigError(
                f"No API key configured for extraction provider '{provider}'"
            )
        if not cls.resolve_model_name(provider, settings):
            raise ExtractionConfigError(
                f"No model configured for extraction provider '{provider}'"
            )
        return OpenAIClientAdapter(
            api_key=api_key or provider,
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        """Configured ``extraction_<provider>_base_url`` first, then the provider's known endpoint."""
        if provider == "openai":
            return None
        configured = (cls._provider_setting(settings, provider, "base_url") or "").strip()
        base_url = configured or cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if base_url:
            return base_url
        if provider == "openai_compatible":
            raise ValueError(
                "extraction_openai_compatible_base_url is required for "
                "extraction_provider=openai_compatible"
            )
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _provider_setting(settings: Settings, provider: str, name: str) -> Any:
        """Read ``extraction_<provider>_<name>``; None when the provider has no such field."""
        return getattr(settings, f"extraction_{provider}_{name}", None)

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        return (cls._provider_setting(settings, provider, "api_key") or "").strip()

    @classmethod
    def resolve_model_name(cls, provider: str, settings: Settings) -> str:
        if provider == "example":
            return "example"
        return (cls._provider_setting(settings, provider, "model_name") or "").strip()

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        return cls._provider_setting(settings, provider, "timeout_seconds") or 60

    @classmethod
    def resolve_temperature(cls, provider: str, settings: Settings) -> float:
        if provider == "openai":
            return settings.extraction_openai_temperature
        if provider == "example":
            return 0.0
        return settings.extraction_temperature
