class ExtractionError(Exception):
    """Raised when an evidence extraction call fails."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class ExtractionConfigError(ExtractionError):
    """Raised when the extraction service has no usable credential or model."""


class PromptLoadError(ExtractionError):
    """Raised when a bundled instruction template cannot be read."""
