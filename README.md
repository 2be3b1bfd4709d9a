# totalfw

Building blocks of a Total.js-style web framework: configuration defaults,
statistics counters, application directory resolution and a set of default
handlers.

## Modules

- `totalfw.config` – `Config`, a dataclass holding the framework settings with
  their defaults (HTTP limits and served file types in `httpfiles`, WebSocket,
  cookie, CSRF expiration, mail and SMTP fields), and `default_config()`, which
  returns a fresh `Config`.
- `totalfw.types` – dataclasses for state and records: `Stats` (with
  `PerformanceStats`, `OtherStats`, `RequestStats`, `ResponseStats`),
  `InternalStats`, `ClusterStats`, `ServiceStats`, `Temporary`, `Routes`,
  `Controller`, `Message`, `SMTPConfig`, `ErrorInfo`, `AuditData`,
  `SuccessResult`, `Currency`, `Proxy`, `Ban`, `DDOSEntry` and `PendingItem`.
  `ErrorInfo.to_dict()` and `AuditData.to_dict()` give JSON-ready dictionaries
  with ISO-formatted dates.
- `totalfw.paths` – `TPath`, which maps the named directories `logs`,
  `scripts`, `public`, `private`, `databases`, `plugins`, `templates`,
  `flowstreams`, `modules` and `tmp` (alias `temp`) onto a base directory.
  `route(path, directory)` treats a leading `~` as an absolute path and a
  leading `_` as a plugin path under `plugins/`. `mkdir`/`verify` create
  missing directories; the coroutines `exists`, `unlink` and `rmdir` run the
  file-system calls in a worker thread.
- `totalfw.framework` – `Framework`, the dataclass holding the whole
  application state (collections, stats, routes, temporary storage, a `TPath`
  rooted at `src` and a `Config`); `initialize_framework()`; `Parsers` (JSON,
  URL-encoded and XML bodies); `Validators` (compiled patterns for e-mail,
  URL, phone, zip, uid, XSS and SQL injection); and `Definitions`, with the
  default handlers `on_success`, `on_audit`, `on_mail`, `on_view_compile` and
  `on_error`.
- `totalfw.globals` – shared constants (`EMPTY_OBJECT`, `EMPTY_ARRAY`,
  `IGNORE_AUDIT`, `SOCKETWINDOWS`, …) and the predicates `is_skippable_error`,
  `is_http_url` and `is_ignored_audit_key`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from totalfw.paths import TPath
from totalfw.framework import initialize_framework, Definitions

path = TPath("src")
print(path.logs("debug.log"))        # src/logs/debug.log
print(path.route("~/etc/app.conf", "public"))  # /etc/app.conf

framework = initialize_framework()
defs = Definitions(framework)
message = defs.on_mail("a@example.com, b@example.com", "Hello", "Body", None, None)
print(message.to_addresses)          # ['a@example.com', 'b@example.com']

print(defs.parsers.urlencoded("a=1&b=2"))  # {'a': '1', 'b': '2'}
print(bool(defs.validators.email.match("someone@example.com")))  # True
```

`Definitions.on_audit(name, data)` appends `data` as one JSON line to
`logs/<name>.log` (`audit.log` when `name` is `None`); write failures are
ignored. `Definitions.on_error(err, name, url)` prints the error, keeps the
last ten in `framework.errors` and increments `framework.stats.error`.

## Command line

The `totalfw` command prints the framework version and shows how the standard
directories resolve, creating the logs directory if it does not exist yet:

```
totalfw
totalfw --root myapp
```

`--root` sets the application base directory (default `src`).

## What this package does not do

There is no HTTP or WebSocket server and no request handling: `Routes`,
`Temporary` and the collections on `Framework` are plain containers that
nothing fills in. `on_mail` only builds a `Message`; no mail is sent. There
are no CSRF token handlers, and the XML parser returns the text unparsed.