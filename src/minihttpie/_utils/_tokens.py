import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union

from ..models.errors import ClassificationError, ClassificationErrorKind
from .constants import (
    ESCAPABLE_CHARS,
    ESCAPE_CHAR,
    SEP_DATA,
    SEP_DATA_RAW_JSON,
    SEP_GROUP_ALL_ITEMS,
    SEP_HEADER,
    SEP_QUERY,
)

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    HEADER = "header"
    QUERY = "query"
    JSON_FIELD = "json_field"
    DATA_FIELD = "data_field"

    @property
    def is_body_field(self) -> bool:
        return self in (TokenKind.JSON_FIELD, TokenKind.DATA_FIELD)


SEPARATOR_KINDS = {
    SEP_HEADER: TokenKind.HEADER,
    SEP_QUERY: TokenKind.QUERY,
    SEP_DATA_RAW_JSON: TokenKind.JSON_FIELD,
    SEP_DATA: TokenKind.DATA_FIELD,
}


@dataclass(frozen=True)
class RequestToken:
    """One request item classified from a command-line argument.

    `key` and `raw_value` have escapes resolved. `sep` is the separator that
    matched and `orig` the argument exactly as it was given.
    """

    key: str
    raw_value: str
    kind: TokenKind
    sep: str = ""
    orig: str = ""


class _Escaped(str):
    """A character that was preceded by a backslash."""


def _tokenize(raw: str) -> List[Union[str, _Escaped]]:
    """Split `raw` into plain runs and escaped characters.

    _tokenize(r'foo\\=bar') => ['foo', _Escaped('='), 'bar']
    """
    parts: List[Union[str, _Escaped]] = [""]
    escaping = False
    for char in raw:
        if escaping:
            escaping = False
            if char in ESCAPABLE_CHARS:
                parts.extend([_Escaped(char), ""])
                continue
            parts[-1] += ESCAPE_CHAR + char
        elif char == ESCAPE_CHAR:
            escaping = True
        else:
            parts[-1] += char
    if escaping:
        parts[-1] += ESCAPE_CHAR
    return parts


def classify(raw: str) -> RequestToken:
    """Classify a single request item.

    The separator found at the earliest unescaped position wins. When more
    than one separator starts there, the longest one wins, so `a:=1` is a raw
    JSON field and `a==1` a query parameter, while `a:b=c` stays a header.

    Raises:
        ClassificationError: when `raw` holds no unescaped separator.
    """
    parts = _tokenize(raw)

    # longer separators overwrite shorter ones starting at the same position
    separators = sorted(SEP_GROUP_ALL_ITEMS, key=len)

    for index, part in enumerate(parts):
        if isinstance(part, _Escaped):
            continue

        found = {}
        for sep in separators:
            position = part.find(sep)
            if position != -1:
                found[position] = sep

        if not found:
            continue

        sep = found[min(found)]
        key, value = part.split(sep, 1)
        key = "".join(parts[:index]) + key
        value += "".join(parts[index + 1 :])

        kind = SEPARATOR_KINDS[sep]
        if kind is TokenKind.HEADER:
            key, value = key.strip(), value.strip()

        token = RequestToken(key=key, raw_value=value, kind=kind, sep=sep, orig=raw)
        logger.debug(f"Classified {raw!r} as {kind.value}")
        return token

    raise ClassificationError(ClassificationErrorKind.MISSING_SEPARATOR, raw)


def classify_all(items: Iterable[str]) -> List[RequestToken]:
    """Classify every item in order, stopping at the first invalid one."""
    return [classify(item) for item in items]
