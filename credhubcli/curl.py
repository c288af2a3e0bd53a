"""Send a raw request to the server and print the JSON it returns."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO
from urllib.parse import parse_qs, urlsplit

from credhubcli.errors import MissingPathError

FAIL_EXIT_CODE = 22
_HTML_ESCAPES = (
    ("&", "\\u0026"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


class CurlFailure(Exception):
    """The server answered with an HTTP error and ``--fail`` was given."""

    def __init__(self, status_code):
        self.status_code = status_code
        self.exit_code = FAIL_EXIT_CODE
        super().__init__(f"request failed with HTTP status {status_code}")


def _parse_body(data):
    if not data:
        return None
    parsed = json.loads(data)
    if parsed is not None and not isinstance(parsed, dict):
        raise ValueError("the request body must be a JSON object")
    return parsed


def _format_headers(headers):
    lines = []
    for name in sorted(headers):
        values = headers[name]
        if isinstance(values, str):
            values = [values]
        lines.extend(f"{name}: {value}\r\n" for value in values)
    return "".join(lines)


def _pretty_json(value):
    text = json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
    for raw, escaped in _HTML_ESCAPES:
        text = text.replace(raw, escaped)
    return text


@dataclass
class CurlCommand:
    """Makes a request against ``path`` and prints the response body.

    The client's ``request`` returns an object with ``status_code``,
    ``headers`` (a mapping of names to a value or list of values), ``body``
    (bytes or text) and optionally ``protocol``.
    """

    client: Any
    path: str = ""
    fail: bool = False
    method: str = ""
    data: str = ""
    include_header: bool = False
    out: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        if not self.path:
            raise MissingPathError()

        parts = urlsplit(self.path)
        query = parse_qs(parts.query, keep_blank_values=True) if parts.query else {}
        body = _parse_body(self.data)

        response = self.client.request(
            self.method or "GET", parts.path, query, body, False
        )
        status = response.status_code

        if self.include_header:
            protocol = getattr(response, "protocol", "HTTP/1.1")
            headers = response.headers
            if not isinstance(headers, Mapping):
                headers = dict(headers)
            print(f"{protocol} {status}", file=self.out)
            print(_format_headers(headers), file=self.out)

        if self.fail and 400 <= status < 600:
            raise CurlFailure(status)

        raw = response.body
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        print(_pretty_json(json.loads(raw)), file=self.out)