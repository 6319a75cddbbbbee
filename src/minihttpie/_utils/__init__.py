from ._encoder import EncodedBody, encode_body
from ._request_spec import (
    BodyField,
    BodyMode,
    HttpMethod,
    RequestSpec,
    RequestSpecBuilder,
    build_request_spec,
    merge_query,
)
from ._tokens import RequestToken, TokenKind, classify, classify_all

__all__ = [
    "BodyField",
    "BodyMode",
    "EncodedBody",
    "HttpMethod",
    "RequestSpec",
    "RequestSpecBuilder",
    "RequestToken",
    "TokenKind",
    "build_request_spec",
    "classify",
    "classify_all",
    "encode_body",
    "merge_query",
]
