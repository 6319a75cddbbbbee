from typing import List, Optional, Tuple

from httpx import Response
from pydantic import BaseModel, ConfigDict, Field

from .._utils.constants import DEFAULT_CHARSET


class HttpResponse(BaseModel):
    """A fully received HTTP response.

    Headers are kept as an ordered list of pairs, exactly as the server sent
    them. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    reason_phrase: str = ""
    http_version: str = "HTTP/1.1"
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    content: bytes = b""

    @classmethod
    def from_httpx(cls, response: Response) -> "HttpResponse":
        encoding = response.headers.encoding
        return cls(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            http_version=response.http_version,
            headers=[
                (name.decode(encoding), value.decode(encoding))
                for name, value in response.headers.raw
            ],
            content=response.content,
        )

    def header(self, name: str) -> Optional[str]:
        """Return the last value received for `name`, matched case-insensitively."""
        value = None
        for key, header_value in self.headers:
            if key.lower() == name.lower():
                value = header_value
        return value

    @property
    def content_type(self) -> Optional[str]:
        """The media type of the body, lower-cased and without parameters."""
        raw = self.header("Content-Type")
        if not raw:
            return None
        return raw.split(";", 1)[0].strip().lower()

    @property
    def charset(self) -> str:
        raw = self.header("Content-Type") or ""
        for param in raw.split(";")[1:]:
            key, _, value = param.partition("=")
            if key.strip().lower() == "charset" and value.strip():
                return value.strip().strip('"')
        return DEFAULT_CHARSET

    @property
    def text(self) -> str:
        try:
            return self.content.decode(self.charset, errors="replace")
        except LookupError:
            return self.content.decode(DEFAULT_CHARSET, errors="replace")
