from .errors import (
    BuildError,
    BuildErrorKind,
    ClassificationError,
    ClassificationErrorKind,
    ExitCode,
    MiniHttpieError,
    TransportError,
    TransportErrorKind,
)
from .response import HttpResponse

__all__ = [
    "BuildError",
    "BuildErrorKind",
    "ClassificationError",
    "ClassificationErrorKind",
    "ExitCode",
    "HttpResponse",
    "MiniHttpieError",
    "TransportError",
    "TransportErrorKind",
]
