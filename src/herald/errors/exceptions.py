"""Custom exception classes for Herald."""


class HeraldError(Exception):
    """Base exception for Herald.

    The message is for operators only. Handlers never put it in the response body.
    """

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidRequestError(HeraldError):
    """Missing signature inputs or failed signature verification."""

    def __init__(self, message: str = "Invalid request"):
        super().__init__("INVALID_REQUEST", message, status_code=401)


class MethodNotAllowedError(HeraldError):
    """Webhook endpoint called with a method other than POST."""

    def __init__(self, method: str):
        self.method = method
        super().__init__("METHOD_NOT_ALLOWED", f"Method {method} not allowed", status_code=405)


class MalformedHexError(ValueError):
    """Text is not an even-length run of hexadecimal digit pairs."""
