import os
import ssl
from typing import Any, Dict, Optional, Tuple, Union

from ..models.errors import TransportError, TransportErrorKind
from .constants import ENV_CA_BUNDLE_VARS, ENV_CA_DIR


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def ca_locations() -> Tuple[Optional[str], Optional[str]]:
    """Return the CA bundle file and directory configured in the environment.

    The first of `SSL_CERT_FILE` and `REQUESTS_CA_BUNDLE` that is set names
    the bundle file; `SSL_CERT_DIR` names a hashed certificate directory.
    """
    cafile = next(
        (path for path in map(_env_path, ENV_CA_BUNDLE_VARS) if path), None
    )
    return cafile, _env_path(ENV_CA_DIR)


def create_ssl_context() -> ssl.SSLContext:
    """Build the context used to verify servers.

    An explicitly configured CA bundle or directory always wins. Otherwise
    the operating system trust store is used through truststore, with the
    certifi bundle as the last resort.

    Raises:
        TransportError: if the configured CA locations cannot be loaded.
    """
    cafile, capath = ca_locations()
    if cafile or capath:
        try:
            return ssl.create_default_context(cafile=cafile, capath=capath)
        except OSError as e:
            raise TransportError(
                TransportErrorKind.TLS_FAILED,
                f"Tls failed: cannot load CA certificates from {cafile or capath}: {e}",
                url="",
            ) from e

    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(cafile=certifi.where())


def get_httpx_client_kwargs(
    timeout: float, follow_redirects: bool, verify_ssl: bool
) -> Dict[str, Any]:
    """Keyword arguments shared by every httpx client the tool creates."""
    verify: Union[ssl.SSLContext, bool] = (
        create_ssl_context() if verify_ssl else False
    )
    return {
        "verify": verify,
        "timeout": timeout,
        "follow_redirects": follow_redirects,
    }
