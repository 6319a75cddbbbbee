"""Text rendering of requests and responses.

Both directions share the same layout: a start line, one line per header, a
blank line and the body. JSON bodies are re-indented when they parse; any
other body is decoded and emitted as it is.
"""

import json
from typing import Iterable, Optional, Tuple

import click
from httpx import Request

from ...models.response import HttpResponse
from ..._utils.constants import DEFAULT_CHARSET, HEADER_CONTENT_TYPE


def is_json_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def format_body(
    content: bytes, content_type: Optional[str], charset: str = DEFAULT_CHARSET
) -> str:
    """Decode a body and pretty-print it when it is JSON.

    Args:
        content: Raw body bytes
        content_type: Value of the Content-Type header, if any
        charset: Charset used to decode non-JSON bodies

    Returns:
        The body as display text
    """
    try:
        text = content.decode(charset, errors="replace")
    except LookupError:
        text = content.decode(DEFAULT_CHARSET, errors="replace")

    if is_json_content_type(content_type):
        try:
            return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except ValueError:
            pass
    return text


def _format_message(
    start_line: str, headers: Iterable[Tuple[str, str]], body: str
) -> str:
    lines = [start_line]
    lines.extend(f"{name}: {value}" for name, value in headers)
    lines.append("")
    lines.append(body)
    return "\n".join(lines)


def render_response(response: HttpResponse) -> str:
    """Render a response as status line, headers, blank line and body.

    Example:
        >>> render_response(HttpResponse(status_code=204, reason_phrase="No Content"))
        'HTTP/1.1 204 No Content\\n\\n'
    """
    status_line = " ".join(
        part
        for part in (
            response.http_version,
            str(response.status_code),
            response.reason_phrase,
        )
        if part
    )
    body = format_body(response.content, response.content_type, response.charset)
    return _format_message(status_line, response.headers, body)


def render_request(request: Request) -> str:
    """Render an outgoing httpx request the way it goes on the wire."""
    target = request.url.raw_path.decode("ascii")
    encoding = request.headers.encoding
    headers = [
        (name.decode(encoding), value.decode(encoding))
        for name, value in request.headers.raw
    ]
    body = format_body(request.content, request.headers.get(HEADER_CONTENT_TYPE))
    return _format_message(f"{request.method} {target} HTTP/1.1", headers, body)


def echo_rendered(text: str, color: bool = False) -> None:
    """Write rendered HTTP text to stdout, highlighted when `color` is set."""
    if not color:
        click.echo(text)
        return

    from rich.console import Console
    from rich.syntax import Syntax

    console = Console(highlight=False)
    console.print(
        Syntax(text, "http", theme="ansi_dark", background_color="default"),
        soft_wrap=True,
    )
