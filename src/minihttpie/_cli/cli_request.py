import sys
from typing import Optional

import click
from pydantic import ValidationError

from .._config import Config
from .._services._dispatcher import RequestDispatcher
from .._utils._encoder import encode_body
from .._utils._request_spec import BodyMode, build_request_spec
from .._utils._tokens import classify_all
from .._version import __version__
from ..models.errors import ExitCode, MiniHttpieError
from ._utils._common import UsageError, setup_logging, split_positionals, validate_url
from ._utils._console import ConsoleLogger
from ._utils._error_handling import extract_clean_error_message
from ._utils._formatters import echo_rendered, render_request, render_response

console = ConsoleLogger.get_instance()


class RequestCommand(click.Command):
    """Click command whose parse errors exit with the usage error code."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = ExitCode.USAGE_ERROR
            raise


def _body_mode_override(force_json: bool, force_form: bool) -> Optional[BodyMode]:
    if force_json and force_form:
        raise UsageError("--json and --form cannot be used together.")
    if force_json:
        return BodyMode.JSON
    if force_form:
        return BodyMode.FORM
    return None


def _load_config(
    timeout: Optional[float], follow: bool, no_verify: bool
) -> Config:
    try:
        config = Config.from_env()
    except ValidationError as e:
        raise UsageError(f"Invalid configuration: {e}") from e

    updates = {}
    if timeout is not None:
        updates["timeout"] = timeout
    if follow:
        updates["follow_redirects"] = True
    if no_verify:
        updates["verify_ssl"] = False
    return config.model_copy(update=updates)


@click.command(
    cls=RequestCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="minihttpie")
@click.argument("args", nargs=-1, metavar="[METHOD] URL [REQUEST_ITEM]...")
@click.option(
    "--json",
    "-j",
    "force_json",
    is_flag=True,
    help="Send body fields as a JSON object (default)",
)
@click.option(
    "--form",
    "-f",
    "force_form",
    is_flag=True,
    help="Send body fields as application/x-www-form-urlencoded",
)
@click.option(
    "--verbose", "-v", is_flag=True, help="Print the request before the response"
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for the server (env: MINIHTTPIE_TIMEOUT)",
)
@click.option("--follow", "-F", is_flag=True, help="Follow redirects")
@click.option(
    "--no-verify", is_flag=True, help="Skip TLS certificate verification"
)
@click.option("--no-color", is_flag=True, help="Never highlight the output")
@click.option("--debug", is_flag=True, help="Log debug information to stderr")
def request(
    args: tuple[str, ...],
    force_json: bool,
    force_form: bool,
    verbose: bool,
    timeout: Optional[float],
    follow: bool,
    no_verify: bool,
    no_color: bool,
    debug: bool,
) -> None:
    """Send an HTTP request and print the response.

    Request items follow the URL:

    \b
      Header:value     request header
      name==value      URL query parameter
      field=value      body field holding a string
      field:=json      body field holding a raw JSON literal

    Prefix a literal ':' or '=' with a backslash.
    """
    setup_logging(debug)

    method, url, items = split_positionals(args)
    validate_url(url)
    body_mode = _body_mode_override(force_json, force_form)
    config = _load_config(timeout, follow, no_verify)
    if not config.verify_ssl:
        console.warning("TLS certificate verification is disabled.")
    color = not no_color and sys.stdout.isatty()

    try:
        tokens = classify_all(items)
        spec = build_request_spec(
            method,
            url,
            tokens,
            body_mode=body_mode,
            default_body_mode=config.default_body_mode,
        )
        body = encode_body(spec)

        with RequestDispatcher(config) as dispatcher:
            prepared = dispatcher.prepare(
                spec.method, spec.target_url, spec.headers, body
            )
            if verbose:
                echo_rendered(render_request(prepared), color=color)
                click.echo()
            response = dispatcher.send(prepared)
    except MiniHttpieError as e:
        console.error(extract_clean_error_message(e), exit_code=e.exit_code)
        return

    echo_rendered(render_response(response), color=color)
