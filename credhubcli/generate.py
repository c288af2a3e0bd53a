"""Generate a credential of a given type on the server."""

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, TextIO

from credhubcli.errors import (
    GenerateEmptyTypeError,
    InvalidJSONMetadataError,
    UserNameOnlyValidForUserTypeError,
)
from credhubcli.output import format_output

OVERWRITE = "overwrite"
NO_OVERWRITE = "no-overwrite"
REDACTED = "<redacted>"


@dataclass
class GenerationParameters:
    """Parameters for generating any credential type other than user."""

    include_special: bool = False
    exclude_number: bool = False
    exclude_upper: bool = False
    exclude_lower: bool = False
    length: int = 0
    common_name: str = ""
    organization: str = ""
    organization_unit: str = ""
    locality: str = ""
    state: str = ""
    country: str = ""
    alternative_names: List[str] = field(default_factory=list)
    extended_key_usage: List[str] = field(default_factory=list)
    key_usage: List[str] = field(default_factory=list)
    key_length: int = 0
    duration: int = 0
    ca: str = ""
    self_sign: bool = False
    is_ca: bool = False
    ssh_comment: str = ""
    username: str = ""


@dataclass
class UserParameters:
    """Parameters for generating a user credential with a fixed username."""

    username: str
    length: int = 0
    include_special: bool = False
    exclude_number: bool = False
    exclude_upper: bool = False
    exclude_lower: bool = False


def _parse_metadata(text):
    try:
        metadata = json.loads(text)
    except json.JSONDecodeError:
        raise InvalidJSONMetadataError() from None
    if metadata is not None and not isinstance(metadata, dict):
        raise InvalidJSONMetadataError()
    return metadata


@dataclass
class GenerateCommand:
    """Asks the server to generate the credential ``name`` of ``credential_type``.

    A client that cannot store metadata raises
    ``ServerDoesNotSupportMetadataError`` from ``generate_credential``.
    """

    client: Any
    name: str
    credential_type: str = ""
    no_overwrite: bool = False
    output_json: bool = False
    username: str = ""
    length: int = 0
    include_special: bool = False
    exclude_number: bool = False
    exclude_upper: bool = False
    exclude_lower: bool = False
    ssh_comment: str = ""
    key_length: int = 0
    duration: int = 0
    common_name: str = ""
    organization: str = ""
    organization_unit: str = ""
    locality: str = ""
    state: str = ""
    country: str = ""
    alternative_names: List[str] = field(default_factory=list)
    key_usage: List[str] = field(default_factory=list)
    extended_key_usage: List[str] = field(default_factory=list)
    ca: str = ""
    is_ca: bool = False
    self_sign: bool = False
    metadata: str = ""
    out: Optional[TextIO] = field(default=None, repr=False)

    def _parameters(self):
        if self.username:
            return UserParameters(
                username=self.username,
                length=self.length,
                include_special=self.include_special,
                exclude_number=self.exclude_number,
                exclude_upper=self.exclude_upper,
                exclude_lower=self.exclude_lower,
            )
        return GenerationParameters(
            include_special=self.include_special,
            exclude_number=self.exclude_number,
            exclude_upper=self.exclude_upper,
            exclude_lower=self.exclude_lower,
            length=self.length,
            common_name=self.common_name,
            organization=self.organization,
            organization_unit=self.organization_unit,
            locality=self.locality,
            state=self.state,
            country=self.country,
            alternative_names=list(self.alternative_names),
            extended_key_usage=list(self.extended_key_usage),
            key_usage=list(self.key_usage),
            key_length=self.key_length,
            duration=self.duration,
            ca=self.ca,
            self_sign=self.self_sign,
            is_ca=self.is_ca,
            ssh_comment=self.ssh_comment,
            username=self.username,
        )

    def execute(self):
        if not self.credential_type:
            raise GenerateEmptyTypeError()

        credential_type = self.credential_type.lower()
        if credential_type != "user" and self.username:
            raise UserNameOnlyValidForUserTypeError()

        parameters = self._parameters()
        mode = NO_OVERWRITE if self.no_overwrite else OVERWRITE
        metadata = _parse_metadata(self.metadata) if self.metadata else None

        credential = self.client.generate_credential(
            self.name, credential_type, parameters, mode, metadata=metadata
        )
        redacted = {**credential, "value": REDACTED}
        print(format_output(self.output_json, redacted), file=self.out)