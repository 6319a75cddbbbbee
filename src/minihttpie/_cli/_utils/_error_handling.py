"""Utility functions for turning errors into user-facing messages."""

from typing import Optional

from ...models.errors import (
    BuildError,
    BuildErrorKind,
    ClassificationError,
    MiniHttpieError,
    TransportError,
    TransportErrorKind,
)

_TRANSPORT_HINTS = {
    TransportErrorKind.CONNECTION_FAILED: "Check the host name, port and your network connection.",
    TransportErrorKind.TLS_FAILED: "Use --no-verify to skip certificate verification for trusted hosts.",
    TransportErrorKind.TIMEOUT: "Increase the limit with --timeout <seconds>.",
    TransportErrorKind.INVALID_RESPONSE: "The server did not answer with valid HTTP.",
}

_BUILD_HINTS = {
    BuildErrorKind.EMPTY_KEY: "Every request item needs a name before its separator.",
    BuildErrorKind.MALFORMED_JSON_LITERAL: "Quote strings inside ':=' items, e.g. 'name:=\"bob\"'.",
    BuildErrorKind.CONFLICTING_BODY_MODE: None,
}


def error_hint(error: MiniHttpieError) -> Optional[str]:
    """Return a short suggestion for fixing `error`, if there is one."""
    if isinstance(error, TransportError):
        return _TRANSPORT_HINTS.get(error.kind)
    if isinstance(error, BuildError):
        return _BUILD_HINTS.get(error.kind)
    if isinstance(error, ClassificationError):
        return "Escape literal ':' or '=' characters with a backslash."
    return None


def extract_clean_error_message(error: Exception, default_message: str = "Request failed") -> str:
    """Extract a clean, user-friendly error message from an exception.

    Known errors keep their message with the hint appended on a second line;
    anything else is reduced to the first line of its message.

    Args:
        error: The exception to extract the message from
        default_message: Fallback message if the exception has none

    Returns:
        A clean, user-friendly error message string
    """
    if isinstance(error, MiniHttpieError):
        hint = error_hint(error)
        return f"{error.message}\n  {hint}" if hint else error.message

    lines = str(error).strip().split("\n")
    return lines[0] if lines[0] else default_message
