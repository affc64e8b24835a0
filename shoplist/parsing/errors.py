"""Errors raised while delegating list parsing to the text parsing service.

Every error carries a short user-facing message (str(exc)) suitable for
showing once in the UI after the manual fallback has produced a list.
"""


class ParsingServiceError(RuntimeError):
    """Base class for delegated parsing failures."""

    default_message = "Parsing service failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MissingCredential(ParsingServiceError):
    default_message = "API key is not set. Add it in the settings."


class EmptyInput(ParsingServiceError):
    default_message = "Text must not be empty."


class AuthenticationFailed(ParsingServiceError):
    default_message = "Invalid API key. Check your key in the settings."


class QuotaExceeded(ParsingServiceError):
    default_message = "Request limit exceeded. Try again later."


class ServiceError(ParsingServiceError):
    """Non-success response, or no response at all when status_code is None."""

    def __init__(self, status_code: int | None = None, message: str | None = None) -> None:
        self.status_code = status_code
        if message is None:
            message = f"HTTP error: {status_code}" if status_code is not None else "Parsing service is unreachable."
        super().__init__(message)


class MalformedResponse(ParsingServiceError):
    default_message = "Could not process the response."


class InvalidImage(ParsingServiceError):
    default_message = "Could not process the image."
