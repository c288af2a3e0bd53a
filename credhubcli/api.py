"""Helpers for targeting a server: security warnings and CA certificates."""

from pathlib import Path
from urllib.parse import urlsplit

INSECURE_HTTP_WARNING = (
    "Warning: Insecure HTTP API detected. Data sent to this API could be intercepted"
    " in transit by third parties. Secure HTTPS API endpoints are recommended."
)
UNVERIFIED_TLS_WARNING = (
    "Warning: The targeted TLS certificate has not been verified for this connection."
)
SKIP_TLS_DEPRECATION = (
    "Warning: The --skip-tls-validation flag is deprecated. Please use --ca-cert instead."
)


def warnings_for(server_url, skip_tls_validation):
    """Return the warnings to show for targeting server_url."""
    scheme = urlsplit(server_url).scheme
    if scheme != "https":
        return [INSECURE_HTTP_WARNING]
    if skip_tls_validation:
        return [UNVERIFIED_TLS_WARNING, SKIP_TLS_DEPRECATION]
    return []


def _read_file_or_string(value):
    path = Path(value)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        is_file = False
    return path.read_text() if is_file else value


def read_or_get_ca_certs(ca_certs):
    """Resolve each entry to a file's contents, or keep it as literal text."""
    return [_read_file_or_string(cert) for cert in ca_certs]