"""A small httpie-style command-line HTTP client.

Request items given on the command line are classified, folded into a
`RequestSpec`, encoded and sent with httpx:

    >>> tokens = classify_all(["name=bob", "age:=18", "X-Trace:abc"])
    >>> spec = build_request_spec(None, "http://httpbin.org/post", tokens)
    >>> encode_body(spec).content
    b'{"name":"bob","age":18}'
"""

from ._cli._utils._formatters import render_request, render_response
from ._config import Config
from ._services import RequestDispatcher, dispatch
from ._utils import (
    BodyField,
    BodyMode,
    EncodedBody,
    HttpMethod,
    RequestSpec,
    RequestSpecBuilder,
    RequestToken,
    TokenKind,
    build_request_spec,
    classify,
    classify_all,
    encode_body,
)
from ._version import __version__
from .models import (
    BuildError,
    BuildErrorKind,
    ClassificationError,
    ClassificationErrorKind,
    ExitCode,
    HttpResponse,
    MiniHttpieError,
    TransportError,
    TransportErrorKind,
)

__all__ = [
    "BodyField",
    "BodyMode",
    "BuildError",
    "BuildErrorKind",
    "ClassificationError",
    "ClassificationErrorKind",
    "Config",
    "EncodedBody",
    "ExitCode",
    "HttpMethod",
    "HttpResponse",
    "MiniHttpieError",
    "RequestDispatcher",
    "RequestSpec",
    "RequestSpecBuilder",
    "RequestToken",
    "TokenKind",
    "TransportError",
    "TransportErrorKind",
    "__version__",
    "build_request_spec",
    "classify",
    "classify_all",
    "dispatch",
    "encode_body",
    "render_request",
    "render_response",
]
