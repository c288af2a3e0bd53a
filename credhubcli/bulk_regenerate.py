"""Regenerate every certificate signed by a given CA."""

from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from credhubcli.output import format_output


@dataclass
class BulkRegenerateCommand:
    """Recursively regenerates the children of the credential ``signed_by``."""

    client: Any
    signed_by: str
    output_json: bool = False
    out: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        regenerated = self.client.bulk_regenerate(self.signed_by)
        print(format_output(self.output_json, regenerated), file=self.out)