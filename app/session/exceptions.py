class InvalidTransitionError(Exception):
    """Raised when a workflow transition is attempted from the wrong stage."""
