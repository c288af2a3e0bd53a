"""Rendering of command results as YAML or JSON."""

import dataclasses
import enum
import json
import os
from collections.abc import Mapping

import yaml

_STR_TAG = "tag:yaml.org,2002:str"
_JSON_ESCAPES = (("&", "\\u0026"), ("\u2028", "\\u2028"), ("\u2029", "\\u2029"))
_YAML_WIDTH = 2**31


class _Dumper(yaml.SafeDumper):
    """YAML dumper that quotes with double quotes."""

    def choose_scalar_style(self):
        style = super().choose_scalar_style()
        return '"' if style == "'" else style


def _represent_str(dumper, data):
    style = "|" if "\n" in data else None
    return dumper.represent_scalar(_STR_TAG, data, style=style)


_Dumper.add_representer(str, _represent_str)


def _to_plain(value):
    """Copy value into fresh dicts and lists, so no container is shared."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)
        }
    if isinstance(value, enum.Enum):
        return _to_plain(value.value)
    if isinstance(value, Mapping):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


def format_output(output_json, value):
    """Render value as tab-indented JSON or as block YAML."""
    plain = _to_plain(value)
    if output_json:
        text = json.dumps(plain, indent="\t", ensure_ascii=False)
        for raw, escaped in _JSON_ESCAPES:
            text = text.replace(raw, escaped)
        return text
    text = yaml.dump(
        plain,
        Dumper=_Dumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=_YAML_WIDTH,
    )
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text


def client_credentials_in_environment(environ=None):
    """Whether client credentials are supplied through the environment."""
    env = os.environ if environ is None else environ
    return bool(env.get("CREDHUB_CLIENT")) or bool(env.get("CREDHUB_SECRET"))