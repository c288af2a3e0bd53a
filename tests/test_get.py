import json

import pytest
import yaml

from credhubcli.errors import (
    GetVersionAndKeyError,
    GetVersionsAndIDIncompatibleParametersError,
    MissingGetParametersError,
    OutputJSONAndQuietError,
)
from credhubcli.get import GetCommand

JSON_CREDENTIAL = {
    "id": "some-id",
    "name": "/example-json",
    "type": "json",
    "value": {"username": "admin", "nested": {"a": 1}},
    "version_created_at": "2017-01-05T01:01:01Z",
}

SCALAR_CREDENTIAL = {
    "id": "other-id",
    "name": "/example-value",
    "type": "value",
    "value": "placeholder",
    "version_created_at": "2017-01-05T01:01:01Z",
}


class FakeClient:
    def __init__(self, credential=None, versions=()):
        self.credential = credential
        self.versions = list(versions)
        self.calls = []

    def get_latest_version(self, name):
        self.calls.append(("latest", name))
        return self.credential

    def get_by_id(self, credential_id):
        self.calls.append(("id", credential_id))
        return self.credential

    def get_n_versions(self, name, count):
        self.calls.append(("versions", name, count))
        return self.versions


def test_get_by_name_yaml(capsys):
    client = FakeClient(JSON_CREDENTIAL)
    GetCommand(client, name="/example-json").execute()
    assert client.calls == [("latest", "/example-json")]
    assert yaml.safe_load(capsys.readouterr().out) == JSON_CREDENTIAL


def test_get_by_id_json(capsys):
    client = FakeClient(JSON_CREDENTIAL)
    GetCommand(client, credential_id="some-id", output_json=True).execute()
    assert client.calls == [("id", "some-id")]
    assert json.loads(capsys.readouterr().out) == JSON_CREDENTIAL


def test_missing_name_and_id():
    client = FakeClient(JSON_CREDENTIAL)
    with pytest.raises(MissingGetParametersError):
        GetCommand(client).execute()
    assert client.calls == []


def test_key_with_string_value(capsys):
    GetCommand(FakeClient(JSON_CREDENTIAL), name="/example-json", key="username").execute()
    assert capsys.readouterr().out == "admin\n"


def test_key_with_structured_value(capsys):
    GetCommand(FakeClient(JSON_CREDENTIAL), name="/example-json", key="nested").execute()
    assert yaml.safe_load(capsys.readouterr().out) == {"a": 1}


def test_key_missing_prints_nothing(capsys):
    GetCommand(FakeClient(JSON_CREDENTIAL), name="/example-json", key="absent").execute()
    assert capsys.readouterr().out == ""


def test_key_on_scalar_value_prints_nothing(capsys):
    GetCommand(FakeClient(SCALAR_CREDENTIAL), name="/example-value", key="x").execute()
    assert capsys.readouterr().out == ""


def test_quiet_string_value(capsys):
    GetCommand(FakeClient(SCALAR_CREDENTIAL), name="/example-value", quiet=True).execute()
    assert capsys.readouterr().out == "placeholder\n"


def test_quiet_structured_value(capsys):
    GetCommand(FakeClient(JSON_CREDENTIAL), name="/example-json", quiet=True).execute()
    assert yaml.safe_load(capsys.readouterr().out) == JSON_CREDENTIAL["value"]


def test_quiet_and_json_are_incompatible():
    with pytest.raises(OutputJSONAndQuietError):
        GetCommand(
            FakeClient(JSON_CREDENTIAL), name="/example-json", quiet=True, output_json=True
        ).execute()


def test_versions(capsys):
    client = FakeClient(versions=[SCALAR_CREDENTIAL, JSON_CREDENTIAL])
    GetCommand(client, name="/example", versions=2).execute()
    assert client.calls == [("versions", "/example", 2)]
    assert yaml.safe_load(capsys.readouterr().out) == {
        "versions": [SCALAR_CREDENTIAL, JSON_CREDENTIAL]
    }


def test_versions_quiet_json(capsys):
    client = FakeClient(versions=[SCALAR_CREDENTIAL, JSON_CREDENTIAL])
    GetCommand(client, name="/example", versions=2, quiet=True, output_json=True).execute()
    assert json.loads(capsys.readouterr().out) == {
        "versions": [SCALAR_CREDENTIAL["value"], JSON_CREDENTIAL["value"]]
    }


def test_versions_with_id_is_rejected():
    with pytest.raises(GetVersionsAndIDIncompatibleParametersError):
        GetCommand(FakeClient(), name="/x", credential_id="id", versions=2).execute()


def test_versions_without_name_is_rejected():
    with pytest.raises(MissingGetParametersError):
        GetCommand(FakeClient(), versions=2).execute()


def test_versions_with_key_is_rejected():
    client = FakeClient()
    with pytest.raises(GetVersionAndKeyError):
        GetCommand(client, name="/x", versions=2, key="k").execute()
    assert client.calls == []