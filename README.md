# caco3

Small helpers for writing services in Python, using only the standard library.

## Installation

```
pip install caco3
```

## Modules

- `caco3.config`: `is_truthy` and `is_falsy` recognise `1/true/y/yes/on` and
  `0/false/n/no/off` (ASCII case-insensitive). `bool_from_choice` turns a bool,
  the integers `0`/`1`, or one of those words into a bool, raising `ValueError`
  for other values and `TypeError` for other types.
- `caco3.meta_config`: `MetaConfig` wraps parsed TOML (`MetaConfig.from_toml`)
  and reads values by dotted path. `get` raises `KeyError` for a missing path;
  `as_bool`, `as_str`, `as_i64`, `as_f64` and `to_offset_datetime` return `None`
  when the value has another type; `to_instance(path, factory)` builds an object
  from the value, passing tables as keyword arguments.
- `caco3.config_tree`: `ConfigTree`, nested settings with `has_key("a.b.c")`,
  `remove_existing_keys(keys)` (returns a new tree, raises
  `RemoveExistingKeyError` for a missing key) and `to_dict`.
- `caco3.human_duration`: `HumanDuration` formats seconds as `1d 5h 7m 3s`;
  `format(n)` keeps the `n` biggest components, `components()` yields
  `DurationComponent` values.
- `caco3.timeutil`: `THAILAND_UTC_OFFSET` (+07:00) and
  `duration_since_unix_time`, which returns `None` for a time in the future.
- `caco3.local_time`: `local_now` and `local_utc_offset`. The time zone comes
  from `TZ` when it is valid, otherwise from `/etc/localtime`, and falls back to
  UTC when that file is missing. It is cached unless `CACO3_CACHE_TIMEZONE` is
  set to a falsy value.
- `caco3.rfc3339`: `parse_rfc3339`, `format_rfc3339` (UTC is written as `Z`),
  `floor_to_second`, `floor_to_millisecond`, and `serialize_*` /
  `deserialize_*` variants for seconds and milliseconds that pass `None` through.
- `caco3.json_api`: `ApiJson`, a `{"code": ..., "data": ...}` or
  `{"code": ..., "message": ...}` response envelope built with `ok`,
  `data_with_code`, `no_content`, `default_error` or `error_builder()`;
  `JsonMode.NORMAL` / `JsonMode.PRETTY` write compact or indented JSON with
  `to_string` and `to_bytes`.
- `caco3.sql`: `sql_trim` removes blank lines and lines starting with `--`.
- `caco3.byte_unit`: `AdjustedByte` picks the biggest fitting binary unit;
  `serialize_appropriate_binary_unit(2048)` gives `"2 KiB"`.
- `caco3.relative_path`: `RelativePath` resolves a path against the directory
  of the file that declared it and serializes it as `{"path": ...}`.
- `caco3.build_info`: `GitSha` (validated 7 to 64 hex digit commit ids,
  `from_cmd` runs `git rev-parse HEAD`) and `BuildInfo`, collected from the
  `TARGET` and `PROFILE` environment variables, the current time, git and the
  compiler version, with `to_dict` / `from_dict`.
- `caco3.cargo`: `discover_workspace` walks up from a path to the first
  directory whose `Cargo.toml` has a `[workspace]` table with `members`, raising
  `WorkspaceNotFoundError` otherwise.
- `caco3.jemalloc`: `JemallocConfig.to_config` renders a malloc configuration
  string, `apply_config` re-executes the current process with it set in
  `MALLOC_CONF` and `_RJEM_MALLOC_CONF`, `is_configured` checks those variables,
  and `JemallocInfo.from_raw(...).to_dict()` formats allocator statistics in
  binary units.

## Examples

```python
from caco3.config import bool_from_choice, is_truthy
from caco3.human_duration import HumanDuration
from caco3.json_api import ApiJson
from caco3.sql import sql_trim

is_truthy("Yes")                           # True
bool_from_choice("Off")                    # False
HumanDuration.from_secs(3601).format(2)    # "1h 0m"
ApiJson.ok({"foo": "bar"}).to_dict()       # {"code": "0", "data": {"foo": "bar"}}
ApiJson.error_builder().error("foo").build().to_dict()
# {"code": "-1", "message": "foo"}
sql_trim("-- comment\nSELECT 1;\n")        # "SELECT 1;"
```

## What it does not do

The package has no dependency container, no web middleware, no timing helper
for logging elapsed time, and no wrapper for cancelled awaitables. It does not
read allocator statistics itself: `JemallocInfo` only formats numbers it is given.

## Running the tests

```
pip install caco3[test]
pytest
```