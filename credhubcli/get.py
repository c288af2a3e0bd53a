"""Retrieve a credential, one of its fields, or several of its versions."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from credhubcli.errors import (
    GetVersionAndKeyError,
    GetVersionsAndIDIncompatibleParametersError,
    MissingGetParametersError,
    OutputJSONAndQuietError,
)
from credhubcli.output import format_output


@dataclass
class GetCommand:
    """Prints a credential looked up by name or ID."""

    client: Any
    name: str = ""
    credential_id: str = ""
    versions: int = 0
    output_json: bool = False
    quiet: bool = False
    key: str = ""
    out: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        if self.versions != 0:
            self._print_versions()
        else:
            self._print_credential()

    def _emit(self, value):
        if isinstance(value, str):
            print(value, file=self.out)
        else:
            print(format_output(self.output_json, value), file=self.out)

    def _print_versions(self):
        if self.credential_id:
            raise GetVersionsAndIDIncompatibleParametersError()
        if not self.name:
            raise MissingGetParametersError()
        if self.key:
            raise GetVersionAndKeyError()

        credentials = self.client.get_n_versions(self.name, self.versions)
        if self.quiet:
            output = {"versions": [credential["value"] for credential in credentials]}
        else:
            output = {"versions": list(credentials)}
        print(format_output(self.output_json, output), file=self.out)

    def _print_credential(self):
        if self.name:
            credential = self.client.get_latest_version(self.name)
        elif self.credential_id:
            credential = self.client.get_by_id(self.credential_id)
        else:
            raise MissingGetParametersError()

        if self.key:
            value = credential["value"]
            if not isinstance(value, Mapping):
                return
            selected = value.get(self.key)
            if selected is None:
                return
            self._emit(selected)
        elif self.quiet:
            if self.output_json:
                raise OutputJSONAndQuietError()
            self._emit(credential["value"])
        else:
            print(format_output(self.output_json, credential), file=self.out)