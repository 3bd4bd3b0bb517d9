class FitnessTrackerError(Exception):
    """Base class for errors raised by the fitness tracker core."""


class StorageInitError(FitnessTrackerError):
    def __init__(self, detail: str = "Storage is not available"):
        super().__init__(detail)
        self.detail = detail


class InvalidInputError(FitnessTrackerError):
    def __init__(self, detail: str, errors: list[dict] | None = None):
        super().__init__(detail)
        self.detail = detail
        self.errors = errors or []


class WriteError(FitnessTrackerError):
    def __init__(self, operation: str, detail: str = "Failed to save workout. Please try again."):
        super().__init__(f"{operation}: {detail}")
        self.operation = operation
        self.detail = detail


class ReadFailure(FitnessTrackerError):
    """Recorded when a read query fails; never raised past the storage layer."""

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class GenerationError(FitnessTrackerError):
    user_message = "Failed to generate workout. Please check your internet connection and API key."

    def __init__(self, reason: str, status_code: int | None = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
