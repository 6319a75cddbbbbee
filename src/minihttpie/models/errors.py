from enum import Enum, IntEnum
from typing import Optional


class ExitCode(IntEnum):
    SUCCESS = 0
    BUILD_ERROR = 1
    TRANSPORT_ERROR = 2
    USAGE_ERROR = 3


class MiniHttpieError(Exception):
    """Base class for every error that aborts an invocation."""

    exit_code: ExitCode = ExitCode.BUILD_ERROR

    def __init__(self, message: str, token: Optional[str] = None):
        self.message = message
        self.token = token
        super().__init__(self.message)


class ClassificationErrorKind(str, Enum):
    MISSING_SEPARATOR = "missing_separator"


class ClassificationError(MiniHttpieError):
    """Raised when a request item matches none of the token patterns."""

    exit_code = ExitCode.USAGE_ERROR

    def __init__(
        self,
        kind: ClassificationErrorKind,
        token: str,
        message: Optional[str] = None,
    ):
        self.kind = kind
        super().__init__(
            message
            or f"'{token}' is not a valid request item "
            "(expected Header:value, name==value, field=value or field:=json)",
            token,
        )


class BuildErrorKind(str, Enum):
    CONFLICTING_BODY_MODE = "conflicting_body_mode"
    EMPTY_KEY = "empty_key"
    MALFORMED_JSON_LITERAL = "malformed_json_literal"


class BuildError(MiniHttpieError):
    """Raised while assembling a request spec from classified tokens."""

    exit_code = ExitCode.BUILD_ERROR

    def __init__(
        self,
        kind: BuildErrorKind,
        message: str,
        token: Optional[str] = None,
    ):
        self.kind = kind
        super().__init__(message, token)

    @staticmethod
    def empty_key(token: str) -> "BuildError":
        return BuildError(
            BuildErrorKind.EMPTY_KEY,
            f"Request item '{token}' has an empty key",
            token,
        )

    @staticmethod
    def malformed_json(token: str, reason: str) -> "BuildError":
        return BuildError(
            BuildErrorKind.MALFORMED_JSON_LITERAL,
            f"Request item '{token}' does not hold a valid JSON literal: {reason}",
            token,
        )

    @staticmethod
    def conflicting_body_mode(token: str) -> "BuildError":
        return BuildError(
            BuildErrorKind.CONFLICTING_BODY_MODE,
            f"Request item '{token}' is a raw JSON field and cannot be sent "
            "as form data; drop --form or use '=' instead of ':='",
            token,
        )


class TransportErrorKind(str, Enum):
    CONNECTION_FAILED = "connection_failed"
    TLS_FAILED = "tls_failed"
    TIMEOUT = "timeout"
    INVALID_RESPONSE = "invalid_response"


class TransportError(MiniHttpieError):
    """Raised when the request could not be exchanged with the server.

    Wraps every transport level failure raised by httpx into one of the
    `TransportErrorKind` categories. The original exception is chained as
    `__cause__`.
    """

    exit_code = ExitCode.TRANSPORT_ERROR

    def __init__(self, kind: TransportErrorKind, message: str, url: str):
        self.kind = kind
        self.url = url
        super().__init__(message)
