from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Contract for provider-specific generative extraction clients."""

    @abstractmethod
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
        """Send an instruction plus an optional binary payload; return the raw response text.

        Raises:
            ExtractionNetworkError: on transport, timeout, or provider API failures.
            ExtractionError: when the provider answers without any text.
        """
