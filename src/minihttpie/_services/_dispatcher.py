from collections.abc import Mapping
from logging import getLogger
from typing import Iterable, Optional, Tuple, Union

from httpx import BaseTransport, Client, Headers, Request

from .._config import Config
from .._utils._encoder import EncodedBody
from .._utils._errors import handle_transport_errors
from .._utils._request_spec import HttpMethod
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    JSON_ACCEPT,
    PACKAGE_NAME,
)
from .._version import __version__
from ..models.response import HttpResponse

HeaderInput = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def user_agent_value() -> str:
    return f"{PACKAGE_NAME}/{__version__}"


def merge_headers(headers: HeaderInput, body: EncodedBody) -> Headers:
    """Combine the body derived headers with the user supplied ones.

    Content-Type (and a JSON friendly Accept for JSON bodies) come from the
    encoded body; any header the user gave explicitly replaces them.
    """
    merged = Headers()
    if body.content_type == CONTENT_TYPE_JSON:
        merged[HEADER_ACCEPT] = JSON_ACCEPT
    if body.content_type:
        merged[HEADER_CONTENT_TYPE] = body.content_type

    items = headers.items() if isinstance(headers, Mapping) else headers
    for name, value in items:
        merged[name] = value
    return merged


class RequestDispatcher:
    """Sends exactly one request per call through an httpx client.

    No retries are attempted: a failed exchange raises `TransportError`.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[BaseTransport] = None,
    ) -> None:
        self._logger = getLogger(PACKAGE_NAME)
        self._config = config or Config()

        client_kwargs = {
            **get_httpx_client_kwargs(
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
                verify_ssl=self._config.verify_ssl,
            ),
            "headers": Headers(self.default_headers),
        }
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = Client(**client_kwargs)

        self._logger.debug(f"HEADERS: {self.default_headers}")

    @property
    def default_headers(self) -> dict[str, str]:
        return {HEADER_USER_AGENT: user_agent_value()}

    def prepare(
        self,
        method: Union[HttpMethod, str],
        url: str,
        headers: HeaderInput,
        body: EncodedBody,
    ) -> Request:
        return self._client.build_request(
            HttpMethod.parse(method).value,
            url,
            headers=merge_headers(headers, body),
            content=body.content or None,
        )

    def send(self, request: Request) -> HttpResponse:
        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {request.headers}")

        with handle_transport_errors(str(request.url)):
            response = self._client.send(request)
            try:
                result = HttpResponse.from_httpx(response)
            finally:
                response.close()

        self._logger.debug(
            f"Response: {result.status_code} {result.reason_phrase} "
            f"({len(result.content)} bytes)"
        )
        return result

    def dispatch(
        self,
        method: Union[HttpMethod, str],
        url: str,
        headers: HeaderInput,
        body: EncodedBody,
    ) -> HttpResponse:
        return self.send(self.prepare(method, url, headers, body))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RequestDispatcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def dispatch(
    method: Union[HttpMethod, str],
    url: str,
    headers: HeaderInput,
    body: EncodedBody,
    config: Optional[Config] = None,
) -> HttpResponse:
    """Send one request with a short-lived dispatcher."""
    with RequestDispatcher(config) as dispatcher:
        return dispatcher.dispatch(method, url, headers, body)
