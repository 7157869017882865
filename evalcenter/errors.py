"""Error taxonomy shared by the question store, the scorer and the HTTP layer.

Every error carries the HTTP status the blueprint answers with, so callers
can tell the four kinds apart without string matching.
"""


class EvaluationError(Exception):
    status_code = 500
    kind = "error"

    def __init__(self, message, details=None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self):
        body = {"error": self.kind, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(EvaluationError):
    """Malformed input the caller can correct."""
    status_code = 400
    kind = "validation_error"


class NotFoundError(EvaluationError):
    status_code = 404
    kind = "not_found"


class ConflictError(EvaluationError):
    """Duplicate evaluation submission."""
    status_code = 409
    kind = "conflict"


class StorageError(EvaluationError):
    """Persistence failure. Never retried here, writes are not idempotent."""
    status_code = 500
    kind = "storage_error"
