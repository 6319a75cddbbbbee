import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

from ._request_spec import BodyField, BodyMode, RequestSpec
from .constants import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON, DEFAULT_CHARSET


@dataclass(frozen=True)
class EncodedBody:
    content: bytes = b""
    content_type: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.content


def _json_payload(fields: Tuple[BodyField, ...]) -> bytes:
    obj: Dict[str, Any] = {}
    for body_field in fields:
        obj[body_field.key] = body_field.value
    return json.dumps(
        obj, ensure_ascii=False, separators=(",", ":"), allow_nan=False
    ).encode(DEFAULT_CHARSET)


def _form_value(body_field: BodyField) -> str:
    if isinstance(body_field.value, str):
        return body_field.value
    return json.dumps(
        body_field.value, ensure_ascii=False, separators=(",", ":"), allow_nan=False
    )


def _form_payload(fields: Tuple[BodyField, ...]) -> bytes:
    pairs: List[Tuple[str, str]] = [(f.key, _form_value(f)) for f in fields]
    return urlencode(pairs, encoding=DEFAULT_CHARSET).encode("ascii")


def encode_body(spec: RequestSpec) -> EncodedBody:
    """Serialize the body fields of `spec` according to its body mode.

    JSON bodies are a single compact object; a key given twice keeps its last
    value. Form bodies keep every pair in order, duplicates included.
    """
    if spec.body_mode is BodyMode.JSON:
        return EncodedBody(_json_payload(spec.body_fields), CONTENT_TYPE_JSON)
    if spec.body_mode is BodyMode.FORM:
        return EncodedBody(_form_payload(spec.body_fields), CONTENT_TYPE_FORM)
    return EncodedBody()
