class ProcessorError(Exception):
    """Base exception for all batch-processing errors."""


class EmptyBatchError(ProcessorError):
    """Raised when a batch is submitted without any evidence files."""


class BatchFailedError(ProcessorError):
    """Raised when every file in a batch failed and the policy forbids an empty report."""


class EvidenceFileError(ProcessorError):
    """Raised when an evidence file cannot be read from disk."""
