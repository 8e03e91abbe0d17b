"""
Domain Errors

Typed failures shared by every bounded context:
- InvalidInput: malformed or missing request fields (400)
- Conflict: duplicate unique key (422)
- UploadFailed: remote image could not be fetched (422)
- Unauthorized / InvalidToken: missing or unusable session (401)
- WrongPassword: credentials did not match (422)
- Forbidden: ownership violation (403)
- NotFound: unknown resource (404)
- RateLimited: too many attempts (429)
- InternalError: persistence or unexpected failure (500)

Each error carries a machine readable ``code`` and a human readable
``message``. The API layer renders them as ``{"error": code, "message": message}``.
"""


class DomainError(Exception):
    """Base class for all errors that are reported to API clients."""

    status_code = 500
    default_code = "server_error"
    default_message = "Something went wrong"

    def __init__(self, code: str | None = None, message: str | None = None):
        self.code = code or self.default_code
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_dict(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}


class InvalidInput(DomainError):
    status_code = 400
    default_code = "invalid_input"
    default_message = "Invalid input"


class Conflict(DomainError):
    status_code = 422
    default_code = "conflict"
    default_message = "Resource already exists"


class UploadFailed(DomainError):
    status_code = 422
    default_code = "download_failed"
    default_message = "Failed to download image"


class Unauthorized(DomainError):
    status_code = 401
    default_code = "unauthorized"
    default_message = "Please log in"


class WrongPassword(Unauthorized):
    # The browser client expects 422 for a password mismatch
    status_code = 422
    default_code = "wrong_password"
    default_message = "Incorrect password"


class InvalidToken(Unauthorized):
    default_code = "invalid_token"
    default_message = "Invalid or expired token"


class Forbidden(DomainError):
    status_code = 403
    default_code = "forbidden"
    default_message = "You do not have access to this resource"


class NotFound(DomainError):
    status_code = 404
    default_code = "not_found"
    default_message = "Not found"


class RateLimited(DomainError):
    status_code = 429
    default_code = "rate_limited"
    default_message = "Too many attempts, please try again after 15 minutes"


class InternalError(DomainError):
    pass
