import ssl
from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import TransportError, TransportErrorKind

_TLS_MARKERS = ("SSL", "TLS", "CERTIFICATE")


def _is_tls_failure(error: BaseException) -> bool:
    seen = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, ssl.SSLError):
            return True
        if any(marker in str(current).upper() for marker in _TLS_MARKERS):
            return True
        current = current.__cause__ or current.__context__
    return False


def _classify(error: Exception) -> TransportErrorKind:
    if isinstance(error, httpx.TimeoutException):
        return TransportErrorKind.TIMEOUT
    if isinstance(error, httpx.ConnectError) and _is_tls_failure(error):
        return TransportErrorKind.TLS_FAILED
    if isinstance(
        error, (httpx.ProtocolError, httpx.DecodingError, httpx.TooManyRedirects)
    ):
        return TransportErrorKind.INVALID_RESPONSE
    return TransportErrorKind.CONNECTION_FAILED


@contextmanager
def handle_transport_errors(url: str) -> Generator[None, None, None]:
    """Context manager for mapping httpx failures onto `TransportError`.

    Wraps the network exchange and converts every `httpx.RequestError` into
    a `TransportError` whose kind tells timeouts, TLS failures, connection
    failures and malformed responses apart. HTTP error statuses are not
    errors here: any received response is a successful exchange.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        TransportError: For every transport level failure.
    """
    try:
        yield
    except httpx.RequestError as e:
        kind = _classify(e)
        reason = str(e) or type(e).__name__
        message = f"{kind.value.replace('_', ' ').capitalize()}: {reason}"
        raise TransportError(kind, message, url) from e
