"""Error taxonomy shared by the stores and the HTTP layer.

Every error carries the HTTP status it maps to and the message returned to
clients as ``{"error": message}``.
"""


class ApiError(Exception):
    """Base class for errors converted into a JSON error response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ApiError):
    """A required body, field or query parameter is missing."""

    status_code = 400
    default_message = "Bad request"


class NotFound(ApiError):
    """No record with the requested id exists."""

    status_code = 404
    default_message = "Not found"


class MethodNotAllowed(ApiError):
    status_code = 405
    default_message = "Method not allowed"


class InternalError(ApiError):
    """Anything unexpected; the message never includes internals."""

    status_code = 500
    default_message = "Internal server error"


class StoreCorruptedError(InternalError):
    """Raised when a store file cannot be parsed and reseeding is disabled."""

    def __init__(self, store: str, cause: Exception | None = None) -> None:
        self.store = store
        self.cause = cause
        super().__init__()
