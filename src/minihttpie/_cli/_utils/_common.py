import logging
import sys
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

import click

from ..._utils._request_spec import HttpMethod
from ..._utils.constants import ALLOWED_URL_SCHEMES
from ...models.errors import ExitCode


class UsageError(click.UsageError):
    """A malformed invocation; always exits with the usage error code."""

    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, message: str, ctx: Optional[click.Context] = None) -> None:
        super().__init__(message, ctx or click.get_current_context(silent=True))


def setup_logging(debug: bool) -> None:
    """Log debug records to stderr when `debug` is set."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def split_positionals(
    args: Sequence[str],
) -> Tuple[Optional[HttpMethod], str, List[str]]:
    """Split positional arguments into method, URL and request items.

    The first argument is taken as the method only when it names a known
    HTTP method and more arguments follow it.

    Raises:
        UsageError: if no URL was given.
    """
    if not args:
        raise UsageError("Missing argument 'URL'.")

    first, *rest = args
    if rest and HttpMethod.is_method(first):
        url, *items = rest
        return HttpMethod.parse(first), url, items
    return None, first, rest


def validate_url(url: str) -> str:
    """Check that `url` is an absolute http(s) URL with a host.

    Raises:
        UsageError: for relative, scheme-less or non-HTTP URLs.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise UsageError(f"Invalid URL '{url}': {e}") from e

    if parts.scheme.lower() not in ALLOWED_URL_SCHEMES or not parts.hostname:
        raise UsageError(
            f"Invalid URL '{url}': expected an absolute http:// or https:// URL"
        )
    return url
