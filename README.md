# dockapi

Plain Python types for a container engine's HTTP API: request and response
models as dataclasses, filter arguments, API version comparison, and the
small decoding rules the engine uses on the wire.

It has no runtime dependencies and performs no I/O.

## Installation

```
pip install dockapi
```

## Modules

- `dockapi.versions`: compare dotted API versions with `compare`,
  `less_than`, `less_than_or_equal_to`, `greater_than`,
  `greater_than_or_equal_to` and `equal`. Components are compared as
  integers; missing or non-numeric components count as 0.
- `dockapi.filters`: the `Args` filter set (`add`, `delete`, `get`,
  `contains`, `match`, `exact_match`, `unique_exact_match`, `fuzzy_match`,
  `match_kv_list`, `validate`, `walk_values`), built with `new_args` and
  `arg` or with `parse_flag`, and encoded with `to_json`,
  `to_param_with_version` and `from_json`.
- `dockapi.strslice`: `StrSlice`, a list of strings whose JSON form may be a
  single string or an array; `parse_str_slice` and `marshal_str_slice`.
- `dockapi.host_config`: `HostConfig`, `Resources`, `UpdateConfig`,
  `RestartPolicy`, `LogConfig`, `DeviceMapping`, and the namespace mode
  strings `NetworkMode`, `WindowsNetworkMode`, `IpcMode`, `PidMode`,
  `UTSMode`, `UsernsMode`, `CgroupSpec`, `Isolation` and
  `WindowsIsolation` with their checks.
- `dockapi.container_config`: `Config`, `HealthConfig`, `WaitCondition` and
  the replies to container operations.
- `dockapi.network`, `dockapi.mount`, `dockapi.blkiodev`, `dockapi.seccomp`:
  endpoint and IPAM settings, mounts, block-device weights and throttles,
  and seccomp profiles (`Seccomp.to_dict`).
- `dockapi.models`: small responses such as `ImageSummary`, `Port` and
  `Volume`.
- `dockapi.stats`: container statistics; `parse_stats` decodes a stats
  document.
- `dockapi.plugin`: plugin configuration; `parse_plugin_interface_type` and
  `sort_plugin_privileges`.
- `dockapi.registry`: `NetIPNet` (CIDR networks), `ServiceConfig`, search
  results and login replies.
- `dockapi.system`: engine information (`Info`, `Version`, `Ping`), image
  inspection, prune reports and `decode_security_options`.
- `dockapi.containers`: containers, their state and network settings
  (`NetworkSettingsBase.host_bindings`), and network requests
  (`NetworkCreateRequest.to_dict`).
- `dockapi.configs`: backend parameters and `AuthConfig`.
- `dockapi.legacy`: container and statistics shapes of API versions 1.19
  and 1.20.

## Examples

Comparing API versions:

```python
from dockapi.versions import compare, less_than

compare("1.0.1", "1")        # 1
less_than("1.21", "1.22")    # True
```

Building and encoding filters:

```python
from dockapi.filters import arg, new_args, to_json, from_json, to_param_with_version

filters = new_args(arg("label", "image=foo"), arg("status", "running"))
filters.match_kv_list("label", {"image": "foo"})   # True
filters.exact_match("status", "running")           # True

decoded = from_json(to_json(filters))
decoded.get("status")                              # ["running"]

created = new_args(arg("created", "today"))
to_param_with_version("1.21", created)   # '{"created":["today"]}'
to_param_with_version("1.22", created)   # '{"created":{"today":true}}'
```

`from_json` also reads the older form in which each key holds a list of
values.

Namespace modes:

```python
from dockapi.host_config import NetworkMode, PidMode

NetworkMode("bridge").network_name()   # "bridge"
PidMode("container:abc").container()   # "abc"
```

Decoding statistics and security options:

```python
from dockapi.stats import parse_stats
from dockapi.system import decode_security_options

parse_stats('{"name": "/web", "memory_stats": {"usage": 1024}}').memory_stats.usage  # 1024
decode_security_options(["name=seccomp,profile=default", "apparmor"])
```

Errors are raised as exceptions: `parse_flag` raises `BadFormatError` for
input without `=`, `Args.validate` raises `InvalidFilterError` for a key that
is not accepted, and the decoders raise `ValueError` on malformed input.

## What it does not do

The package holds types and decoding helpers only. It has no HTTP client and
does not connect to an engine, so it cannot start, inspect or remove
containers, pull or build images, or manage networks and volumes; pair it
with whatever HTTP client you already use.

## Running the tests

```
pip install -e ".[test]"
pytest
```