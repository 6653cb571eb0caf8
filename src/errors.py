"""Error taxonomy — every failure the library raises derives from SpeechToTextError."""
from src.constants import (
    MSG_API_ERROR,
    MSG_CONVERSION_FAILED,
    MSG_MISSING_CREDENTIAL,
    MSG_UNAUTHORIZED,
    MSG_UNSUPPORTED_FORMAT,
)


class SpeechToTextError(Exception):
    pass


class MissingCredential(SpeechToTextError):
    def __init__(self, message: str = MSG_MISSING_CREDENTIAL) -> None:
        super().__init__(message)


class UnsupportedFormat(SpeechToTextError):
    def __init__(self, extension: str) -> None:
        super().__init__(MSG_UNSUPPORTED_FORMAT % extension)
        self.extension = extension


class Unauthorized(SpeechToTextError):
    """The remote API rejected the credential (HTTP 401)."""

    def __init__(self, message: str = MSG_UNAUTHORIZED) -> None:
        super().__init__(message)


class RemoteApiError(SpeechToTextError):
    """Any other non-success status. Carries the raw response body verbatim."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(MSG_API_ERROR % body)
        self.status_code = status_code
        self.body = body


class ConversionFailed(SpeechToTextError):
    def __init__(self, returncode: int | None, stderr: str = "", message: str | None = None) -> None:
        super().__init__(message or MSG_CONVERSION_FAILED % (returncode, stderr))
        self.returncode = returncode
        self.stderr = stderr
