"""Export the latest version of credentials under a path."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, TextIO

from credhubcli.output import format_output

_HTML_ESCAPES = (
    ("&", "\\u0026"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def get_all_credentials_for_path(client, path):
    """Fetch the latest version of every credential under path.

    Certificates signed by another credential name their CA by ``ca_name``
    instead of carrying the CA certificate itself.
    """
    found = client.find_by_path(path)
    credentials = []
    for entry in found["credentials"]:
        credential = dict(client.get_latest_version(entry["name"]))
        if credential.get("type") == "certificate":
            metadata = client.get_certificate_metadata_by_name(credential["name"])
            signed_by = metadata.get("signed_by", "")
            value = credential.get("value")
            if signed_by and signed_by != credential["name"] and isinstance(value, Mapping):
                value = {k: v for k, v in value.items() if k != "ca"}
                value["ca_name"] = signed_by
                credential["value"] = value
        credentials.append(credential)
    return credentials


def _sorted(value):
    if isinstance(value, Mapping):
        return {key: _sorted(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_sorted(item) for item in value]
    return value


def _entry(credential):
    entry = {
        "name": credential.get("name", ""),
        "type": credential.get("type", ""),
        "value": _sorted(credential.get("value")),
    }
    if credential.get("metadata"):
        entry["metadata"] = _sorted(credential["metadata"])
    return entry


def export_credentials(credentials, output_json):
    """Render credentials in the bulk import format, as JSON or YAML."""
    entries = [_entry(credential) for credential in credentials]
    if output_json:
        text = json.dumps(
            {"Credentials": entries}, separators=(",", ":"), ensure_ascii=False
        )
        for raw, escaped in _HTML_ESCAPES:
            text = text.replace(raw, escaped)
        return text
    return format_output(False, {"credentials": entries})


@dataclass
class ExportCommand:
    """Exports credentials under ``path`` to standard output or to ``file``."""

    client: Any
    path: str = ""
    file: str = ""
    output_json: bool = False
    out: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        credentials = get_all_credentials_for_path(self.client, self.path)
        exported = export_credentials(credentials, self.output_json)
        if self.file:
            Path(self.file).write_text(exported)
        else:
            print(exported, end="", file=self.out)