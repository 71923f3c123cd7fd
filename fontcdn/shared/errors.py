"""
Error types shared across modules.

Only request validation failures ever reach a caller; configuration errors
abort the process before a request is served.
"""


class FontCdnError(Exception):
    """Base error with a stable code and the HTTP status it maps to."""

    code = "FONT_CDN_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Serialize for logs."""
        return {"code": self.code, "message": self.message}


class RequestValidationFailed(FontCdnError):
    """A request broke one of the validation rules. Never retried."""

    code = "VALIDATION_ERROR"
    http_status = 400


class ConfigError(FontCdnError, ValueError):
    """
    Startup configuration could not be parsed.

    A ValueError as well, so settings validators report it as a field error.
    """

    code = "CONFIG_ERROR"
