"""Errors raised while talking to the chat completion endpoint."""

from typing import Any

from cardforge.exceptions import ServiceError


class CompletionError(ServiceError):
    """Base class for completion call failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=502)


class TransportError(CompletionError):
    """The request did not complete (DNS, refused connection, timeout)."""


class UpstreamError(CompletionError):
    """The endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: Any = None) -> None:
        self.upstream_status_code = status_code
        self.body = body
        super().__init__(f"Completion endpoint returned HTTP {status_code}")


class MalformedResponseError(CompletionError):
    """A success response without the expected message content."""


class ResponseParseError(CompletionError):
    """No JSON value could be recovered from the model output."""

    def __init__(self, content: str) -> None:
        self.content = content
        super().__init__("Model output is not valid JSON")


class SchemaValidationError(CompletionError):
    """The model output parsed but does not match the expected shape."""

    def __init__(self, errors: list[dict[str, Any]], parsed: Any) -> None:
        self.errors = errors
        self.parsed = parsed
        super().__init__(f"Model output failed schema validation ({len(errors)} errors)")
