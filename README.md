# pawtools

Building blocks for a password manager, and a small `paw-cli` command.

## Modules

- `pawtools.bech32`: `encode(hrp, data)` and `decode(s)`. An uppercase
  human-readable part gives an uppercase result. Strings longer than 90
  characters, mixed case, bad characters, a misplaced `1` separator, a wrong
  checksum or bad padding raise `Bech32Error`, which is a `ValueError`.
- `pawtools.otp`: `hotp(key, count, digits=6, digestmod=None)` (RFC 4226) and
  `totp(secret, when=None, interval=30, digits=6, digestmod=None)` (RFC 6238).
  `when` can be a `datetime`, a Unix timestamp, or `None` for the current time.
  The default digest is SHA-1. A `digits` or `interval` below 1, or a counter
  that does not fit in 64 unsigned bits, raises `OTPError`.
- `pawtools.hibp`: `check_password(password, client=None)` returns
  `(found, count)` from the Pwned Passwords range API. Only the first five hex
  characters of the password's SHA-1 digest are sent. The client is any object
  that has a `get(url)` method returning the response body as text. The
  default is `UrllibClient(timeout=10.0)`. Failed requests and malformed
  counts raise `PwnedCheckError`.
- `pawtools.ico`: `decode(stream)` reads an ICO file from a binary stream,
  picks the widest image in it, and returns it as a Pillow image. The image
  may be stored as PNG or as BMP. It raises `IcoError` on a bad signature,
  truncated data or undecodable BMP data. The dataclasses `IconHeader`,
  `IconDirectoryEntry`, `BitmapFileHeader` and `BitmapInfoHeader` each have a
  `pack()` method that returns their little-endian bytes.
- `pawtools.favicon`: `FaviconOptions` (`client`, `min_size=32`,
  `force_min_size`, `service`) and `download(host, options=None)`. No download
  location is implemented, so `download` always raises `FaviconError`.
- `pawtools.themed`: `Resource(name, content)` and `ThemedResource(dark, light)`.
  `select`, `name` and `content` take an 8-bit RGB or RGBA foreground colour.
  They return the light variant when `is_light(foreground)` is true, that is,
  when the foreground is dark.
- `pawtools.clipboard`: `write_to_clipboard(backend, data, timeout=1.0,
  interval=0.01)` writes bytes to a backend that has `read()` and `write(data)`
  methods, then polls until the new value shows up. It raises `ClipboardError`
  on timeout, or when some other value replaces the data. `MemoryClipboard` is
  an in-process backend.
- `pawtools.cli`: the `Command` base class with `parse`, `usage` and `run`,
  `VersionCommand`, and `parse_common_flags` for `-h`/`-help`. A command's
  `parse` raises `UsageRequested` when help is asked for. The module also has
  the prompt helpers `ask`, `ask_with_default`, `ask_yes_no`, `ask_int`,
  `ask_choice`, `ask_password` and `ask_password_with_confirm`.
  `ask_password` raises `RuntimeError` when standard input is not a terminal.
  `parse_item_path(path, full_path=False, wildcard=False, parse_type=None)`
  parses `VAULT_NAME/ITEM_TYPE/ITEM_NAME` into an `ItemPath`.
- `pawtools.main`: `main(argv=None)`, the `paw-cli` entry point. It returns
  the exit code.

## Install

```
pip install .
```

## Examples

```python
from pawtools import bech32, otp

encoded = bech32.encode("age", b"\x00\x01\x02")
hrp, data = bech32.decode(encoded)   # ("age", b"\x00\x01\x02")

code = otp.hotp(b"secret", 0)        # a six-digit string
```

## Command line

```
paw-cli
paw-cli version
paw-cli version -help
```

`paw-cli version` prints `paw-cli version (unknown)` unless
`pawtools.main.VERSION` is set. With `-h` or `-help` a command prints its
usage and exits with status 0. With no command, or a command it does not
know, `paw-cli` prints the list of commands and exits with status 1. An
unknown flag or any other error is printed as `[✗] <message>` on standard
error, and the exit status is 1.

## What it does not do

The package has no vault storage and no encryption of vaults. `paw-cli`
offers only the `version` command. There are no commands to create a vault,
or to add, edit, list, show or remove items, or to generate passwords.
`pawtools.favicon.download` does not fetch any icons. There is no system
clipboard backend: supply your own object with `read`/`write`, or use
`MemoryClipboard`.

## Running the tests

```
pip install .[test]
pytest
```