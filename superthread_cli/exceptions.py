"""
superthread-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — validation, not-found, network, parse errors."""

    exit_code = 1


class SetupError(CliError):
    """Exit code 2 — missing API key, invalid config file, no workspace."""

    exit_code = 2


class PathValidationError(CliError):
    """An identifier cannot be safely interpolated into a URL path.

    Raised locally, before any request is made.
    """


class ApiError(CliError):
    """A non-2xx response from the Superthread API."""

    def __init__(self, message, status=None, body=None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body


class ClientError(ApiError):
    """HTTP 4xx."""


class ValidationError(ClientError):
    """HTTP 400 / 422 — rejected parameters."""


class AuthenticationError(ClientError):
    """HTTP 401 — missing or invalid API key."""


class ForbiddenError(ClientError):
    """HTTP 403 — permission denied."""


class NotFoundError(ClientError):
    """HTTP 404."""


class RateLimitError(ClientError):
    """HTTP 429, or a 403 whose message reports a rate limit."""

    def __init__(self, message, status=None, body=None, retry_after=None):
        super().__init__(message, status=status, body=body)
        self.retry_after = retry_after


class ServerError(ApiError):
    """HTTP 5xx."""


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors; the client classifies it."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
