# credhubcli

The commands behind a CredHub command-line client: finding, reading,
generating, exporting and deleting credentials, regenerating certificates
in bulk, inspecting and removing permissions, and issuing raw API requests.

Each command is a dataclass with an `execute()` method. It is given a client
object, prints its result as YAML or, on request, as JSON to its `out`
stream (standard output when `out` is `None`), and raises an exception from
`credhubcli.errors` when the request cannot be carried out.

## Commands

| Class | Module | What it does |
| --- | --- | --- |
| `FindCommand` | `credhubcli.find` | Lists credentials whose name contains `name_like`, or that live under `path` |
| `GetCommand` | `credhubcli.get` | Shows a credential by `name` or `credential_id`, a single field of it (`key`), only its value (`quiet`), or several versions (`versions`) |
| `GenerateCommand` | `credhubcli.generate` | Asks the server to generate a credential; the printed value is replaced by `<redacted>` |
| `DeleteCommand` | `credhubcli.delete` | Deletes one credential by `name`, or every credential under `path` |
| `ExportCommand` | `credhubcli.export` | Writes the latest version of every credential under `path` as YAML or JSON, to `out` or to `file` |
| `BulkRegenerateCommand` | `credhubcli.bulk_regenerate` | Regenerates every certificate signed by `signed_by` |
| `GetPermissionCommand` | `credhubcli.permission` | Shows the permission `actor` holds on `path` |
| `DeletePermissionCommand` | `credhubcli.permission` | Removes the permission `actor` holds on `path` and prints it |
| `CurlCommand` | `credhubcli.curl` | Sends a request with `method`, `path` and JSON `data`, and pretty-prints the JSON reply; `include_header` prints the status line and headers first |

```python
from credhubcli.find import FindCommand

FindCommand(client, path="deploy123").execute()
```

`DeleteCommand` reports progress on `out` and lists the credentials that
failed to delete, as YAML, on `errout`. `GenerateCommand` builds its request
from `GenerationParameters`, or from `UserParameters` when a `username` is
given, and passes `metadata` parsed from JSON. `export_credentials` and
`get_all_credentials_for_path` in `credhubcli.export` can be used on their
own; certificates signed by another credential are exported with `ca_name`
in place of the CA certificate.

The permission commands need a server of major version 2 or later and raise
`UnsupportedServerVersionError` otherwise.

## The client object

The commands call these methods on the client they are given:

- `find_by_path(path)`, `find_by_partial_name(name_like)` returning a mapping with a `credentials` list
- `get_latest_version(name)`, `get_by_id(id)`, `get_n_versions(name, n)`
- `get_certificate_metadata_by_name(name)` returning a mapping with `signed_by`
- `generate_credential(name, type, parameters, mode, metadata=...)`
- `delete(name)`, `bulk_regenerate(signed_by)`
- `server_version()`, `get_permission_by_path_actor(path, actor)`, `delete_permission(uuid)`
- `request(method, path, query, body, check_errors)` returning an object with `status_code`, `headers`, `body` and optionally `protocol`

## Errors

All errors raised for the user derive from `credhubcli.errors.CommandError`,
so a caller can catch that one class and show its message. Among them:

- `MissingGetParametersError` when neither a name nor an ID is given to `GetCommand`
- `MissingDeleteParametersError` when neither a name nor a path is given to `DeleteCommand`
- `BulkDeleteFailureError` when some credentials under a path could not be deleted
- `NoMatchingCredentialsFoundError` when a name search finds nothing
- `GenerateEmptyTypeError` when `GenerateCommand` is given no credential type
- `InvalidJSONMetadataError` when the metadata given to `GenerateCommand` is not a JSON object
- `MissingPathError` when `CurlCommand` is given no path

When `CurlCommand` has `fail` set and the server answers with a 4xx or 5xx
status, it raises `CurlFailure`, whose `exit_code` is 22, without printing
the body.

## Helpers

```python
from credhubcli.output import format_output
from credhubcli.api import warnings_for

print(format_output(False, {"regenerated_credentials": ["cert1", "cert2"]}))
# regenerated_credentials:
# - cert1
# - cert2

for message in warnings_for("http://credhub.example.com:8844", False):
    print(message)
```

`format_output` returns block YAML by default and tab-indented JSON when its
first argument is true. `client_credentials_in_environment` tells whether
`CREDHUB_CLIENT` or `CREDHUB_SECRET` is set. `warnings_for` returns the
warnings to show before targeting a server: plain HTTP, or skipped TLS
validation. `read_or_get_ca_certs` accepts CA certificates given either as
file paths or as PEM text and returns their contents.

## What this package does not do

It has no HTTP client, no login or token handling, no configuration file and
no command-line entry point. The caller supplies a client object with the
methods listed above and decides how to parse arguments and turn exceptions
into exit statuses. Targeting a server is limited to the helpers in
`credhubcli.api`; there is no command that stores the target.

## Tests

The test suite uses pytest and is declared in the `test` extra.