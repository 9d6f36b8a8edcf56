# nodekit

A small toolkit of building blocks for event-driven Python programs. It has no
dependencies outside the standard library.

- `nodekit.event`: `Event`, an emitter with `on`, `once`, `off`, `emit`, and
  `stop` / `skip` / `resume` to pause and restart delivery.
- `nodekit.observer`: `Observer`, a set of named fields; `set` calls the
  field's listeners with the old and the new value.
- `nodekit.expected`: `Expected`, a value-or-error holder that raises
  `ExpectedError` when the missing side is asked for.
- `nodekit.variant`: `Variant`, a value whose type must be one of a fixed
  tuple of types (`TypeError` otherwise).
- `nodekit.strings`: ASCII character tests (`is_alpha`, `is_digit`, ...),
  lenient number parsing (`to_int`, `to_uint`, `to_float`, `to_bool`) and
  `to_string`.
- `nodekit.text`: `slice_text`, `splice_text`, `find`, `compare`, case
  conversion (`to_capital_case`, `to_slugify`, ...) and `xor`.
- `nodekit.iterators`: `count`, `reduce`, `get`, `every`, `some`, `none` and
  `join` over positional arguments.
- `nodekit.path`: `normalize`, `parse` into a `PathInfo`, `format_path`,
  `relative`, `extname`, `mimetype` and segment helpers (`push`, `pop`,
  `shift`, `unshift`, `split`, `join`).
- `nodekit.date`: `Date`, calendar fields backed by a Unix timestamp, local or
  UTC, with comparison and arithmetic; `now()` and per-field helpers.
- `nodekit.console`: `Console` with colours (`Color`) and the module-level
  `log`, `err`, `info`, `warning`, `error`, `success` and `done`.
- `nodekit.env`: `get_env`, `set_env`, `remove_env`, and `init` to load
  `NAME=value` lines from a file.
- `nodekit.limit`: read and set the open-file limits.
- `nodekit.signals`: `start()` routes process signals to events such as
  `on_sigint` and `on_sigterm`; `ignore`, `unignore` and `emit`.
- `nodekit.dns`: `is_ipv4`, `is_ipv6`, `is_ip`, `lookup`, `lookup_ipv4`,
  `lookup_ipv6` and `get_hostname`.
- `nodekit.file`: `File`, a byte-oriented handle with chunked, line and
  delimiter reads, ranges, and stop/resume state.
- `nodekit.fs`: filesystem helpers (`read_file`, `write_file`,
  `append_file`, `copy_file`, `read_folder`, `copy_folder`, ...).
- `nodekit.http`: `status_text`, `parse_head`, request and response head
  formatting, and a blocking `fetch`.

## Install

```
pip install nodekit
```

## Examples

```python
from nodekit.event import Event

changed = Event()
handle = changed.on(lambda value: print("changed to", value))
changed.once(lambda value: print("first change only"))
changed.emit(1)
changed.emit(2)
changed.off(handle)
```

```python
from nodekit.observer import Observer

settings = Observer({"volume": 5})
settings.on("volume", lambda old, new: print(old, "->", new))
settings.set("volume", 7)
print(settings["volume"])  # 7
```

```python
from nodekit import path

print(path.normalize("a/b/../c"))     # a/c
print(path.extname("index.html"))     # html
print(path.mimetype("photo.png"))     # image/png
print(path.relative("a/b/c", "a/d"))  # ../../d
```

```python
from nodekit import console

console.info("server started")
console.warning("disk almost full")
```

```python
from nodekit.http import parse_head, status_text

print(status_text(404))  # Not Found
message = parse_head(b"GET /index.html?x=1 HTTP/1.0\r\nHost: example.com\r\n\r\n")
print(message.method, message.path, message.query)  # GET /index.html {'x': '1'}
```

## What it does not do

- There is no HTTP server. `fetch` is a single blocking request over plain
  TCP (`http` and `ws` URLs only, no TLS), reading the body until the server
  closes the connection.
- There is no event loop, worker or lock primitive; `Event` calls its
  listeners synchronously inside `emit`.

## Tests

```
pip install nodekit[test]
pytest
```