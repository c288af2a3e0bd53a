"""Delete a credential by name, or every credential under a path."""

from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from credhubcli.errors import BulkDeleteFailureError, MissingDeleteParametersError
from credhubcli.output import format_output

_CLEAR_LINE = "\033[2K\r"


@dataclass
class DeleteFailedCredential:
    """A credential that could not be deleted, with the reason."""

    name: str
    err: str


@dataclass
class DeleteCommand:
    """Deletes the credential ``name`` or all credentials under ``path``."""

    client: Any
    name: str = ""
    path: str = ""
    quiet: bool = False
    out: Optional[TextIO] = field(default=None, repr=False)
    errout: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        if self.name:
            self._delete_by_name()
        elif self.path:
            self._delete_by_path()
        else:
            raise MissingDeleteParametersError()

    def _delete_by_name(self):
        self.client.delete(self.name)
        print("Credential successfully deleted", file=self.out)

    def _delete_each(self):
        results = self.client.find_by_path(self.path)
        credentials = results["credentials"]
        total = len(credentials)
        failed = []
        for index, credential in enumerate(credentials, start=1):
            name = credential["name"]
            try:
                self.client.delete(name)
            except Exception as exc:
                failed.append(DeleteFailedCredential(name, str(exc)))
            if not self.quiet:
                succeeded = index - len(failed)
                print(
                    f"{_CLEAR_LINE}{succeeded} out of {total} credentials under the "
                    "provided path are successfully deleted.",
                    file=self.out,
                )
        return failed, total

    def _delete_by_path(self):
        failed, total = self._delete_each()
        if not failed:
            if self.quiet:
                print(
                    f"All {total} out of {total} credentials under the provided path "
                    "are successfully deleted.",
                    file=self.out,
                )
            return

        if self.quiet:
            print(
                f"{total - len(failed)} out of {total} credentials under the provided "
                "path are successfully deleted.",
                file=self.out,
            )
        print(
            f"{len(failed)} out of {total} credentials under the provided path failed "
            "to delete. The following credentials failed to delete:",
            file=self.errout,
        )
        print(format_output(False, failed), end="", file=self.errout)
        raise BulkDeleteFailureError()