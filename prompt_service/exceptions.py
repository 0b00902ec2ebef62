"""Custom exceptions for the prompt service.

Each exception carries a stable ``code`` for programmatic handling and the
HTTP status the API layer maps it to.
"""


class PromptServiceError(Exception):
    """Base exception for the prompt service."""
    code = "internal_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict:
        return {"error": self.message, "code": self.code}


class InvalidInputError(PromptServiceError):
    """Raised when a required field is missing or empty."""
    code = "invalid_input"
    status_code = 400


class InvalidPathError(InvalidInputError):
    """Raised when a category or name would escape the store root."""
    code = "invalid_path"


class PromptNotFoundError(PromptServiceError):
    """Raised when the requested prompt file doesn't exist."""
    code = "not_found"
    status_code = 404


class UpstreamError(PromptServiceError):
    """Raised when the completion provider fails or returns a fault."""
    code = "upstream_failure"
    status_code = 500


class StorageError(PromptServiceError):
    """Raised on a filesystem error for a path expected to be readable."""
    code = "storage_fault"
    status_code = 500
