"""Find credentials by partial name or by path."""

from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from credhubcli.errors import NoMatchingCredentialsFoundError
from credhubcli.output import format_output


@dataclass
class FindCommand:
    """Lists credentials whose name contains ``name_like``, or that live under ``path``."""

    client: Any
    name_like: str = ""
    path: str = ""
    output_json: bool = False
    out: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        if self.name_like:
            results = self.client.find_by_partial_name(self.name_like)
            if not results["credentials"]:
                raise NoMatchingCredentialsFoundError()
        else:
            results = self.client.find_by_path(self.path)
        print(format_output(self.output_json, results), file=self.out)