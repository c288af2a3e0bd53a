import json
from dataclasses import dataclass

import yaml

from credhubcli.output import client_credentials_in_environment, format_output


def test_yaml_list_in_mapping():
    value = {"regenerated_credentials": ["cert1", "cert2", "cert3"]}
    assert format_output(False, value) == (
        "regenerated_credentials:\n- cert1\n- cert2\n- cert3\n"
    )


def test_yaml_empty_list():
    assert format_output(False, {"credentials": []}) == "credentials: []\n"


def test_yaml_timestamp_like_string_is_double_quoted():
    value = {"name": "dan.password", "version_created_at": "2016-09-06T23:26:58Z"}
    assert format_output(False, value) == (
        'name: dan.password\nversion_created_at: "2016-09-06T23:26:58Z"\n'
    )


def test_yaml_keeps_key_order():
    value = {"name": "/path/to/cred", "type": "value", "value": "foo"}
    text = format_output(False, value)
    assert text.splitlines() == ["name: /path/to/cred", "type: value", "value: foo"]


def test_yaml_bool_like_string_round_trips():
    value = {"v": "true"}
    text = format_output(False, value)
    assert text == 'v: "true"\n'
    assert yaml.safe_load(text) == value


def test_yaml_multiline_uses_literal_block():
    value = {"certificate": "line1\nline2\n"}
    text = format_output(False, value)
    assert text.startswith("certificate: |")
    assert yaml.safe_load(text) == value


def test_yaml_top_level_scalar_has_no_document_end():
    assert format_output(False, 5) == "5\n"


def test_yaml_dataclass():
    @dataclass
    class Item:
        name: str
        err: str

    text = format_output(False, [Item("a", "b")])
    assert yaml.safe_load(text) == [{"name": "a", "err": "b"}]


def test_json_round_trip_and_tab_indent():
    value = {"regenerated_credentials": ["cert1", "cert2", "cert3"]}
    text = format_output(True, value)
    assert json.loads(text) == value
    assert '\n\t"regenerated_credentials"' in text


def test_json_keeps_angle_brackets():
    text = format_output(True, {"value": "<redacted>"})
    assert "<redacted>" in text
    assert json.loads(text) == {"value": "<redacted>"}


def test_json_escapes_ampersand():
    text = format_output(True, {"q": "a&b"})
    assert "&" not in text
    assert "\\u0026" in text
    assert json.loads(text) == {"q": "a&b"}


def test_client_credentials_in_environment():
    assert client_credentials_in_environment({"CREDHUB_CLIENT": "client"}) is True
    assert client_credentials_in_environment({"CREDHUB_SECRET": "secret"}) is True
    assert client_credentials_in_environment({"CREDHUB_CLIENT": ""}) is False
    assert client_credentials_in_environment({}) is False