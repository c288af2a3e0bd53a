"""Show or delete the permission an actor holds on a path."""

import re
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from credhubcli.errors import UnsupportedServerVersionError
from credhubcli.output import format_output


def _major_version(version):
    if isinstance(version, str):
        match = re.match(r"\s*v?(\d+)", version)
        if match is None:
            raise ValueError(f"malformed server version: {version!r}")
        return int(match.group(1))
    if isinstance(version, int):
        return version
    return int(version[0])


def _require_v2(client):
    if _major_version(client.server_version()) < 2:
        raise UnsupportedServerVersionError()


def _sorted(permission):
    if isinstance(permission, dict):
        return {key: permission[key] for key in sorted(permission)}
    return permission


@dataclass
class GetPermissionCommand:
    """Prints the permission of ``actor`` on ``path``."""

    client: Any
    actor: str
    path: str
    output_json: bool = False
    out: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        _require_v2(self.client)
        permission = self.client.get_permission_by_path_actor(self.path, self.actor)
        print(format_output(self.output_json, _sorted(permission)), file=self.out)


@dataclass
class DeletePermissionCommand:
    """Deletes the permission of ``actor`` on ``path`` and prints it."""

    client: Any
    actor: str
    path: str
    out: Optional[TextIO] = field(default=None, repr=False)

    def execute(self):
        _require_v2(self.client)
        permission = self.client.get_permission_by_path_actor(self.path, self.actor)
        deleted = self.client.delete_permission(permission["uuid"])
        print(format_output(False, _sorted(deleted)), file=self.out)