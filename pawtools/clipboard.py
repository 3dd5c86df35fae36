"""Write text to a clipboard backend and confirm it took effect."""

from __future__ import annotations

import time
from typing import Optional, Protocol

WATCH_INTERVAL = 0.01
WRITE_TIMEOUT = 1.0


class ClipboardError(RuntimeError):
    """Raised when data could not be placed on the clipboard."""


class ClipboardBackend(Protocol):
    def read(self) -> Optional[bytes]: ...

    def write(self, data: bytes) -> None: ...


class MemoryClipboard:
    """An in-process clipboard holding a single value."""

    def __init__(self, content: Optional[bytes] = None) -> None:
        self._content = None if content is None else bytes(content)

    def read(self) -> Optional[bytes]:
        return self._content

    def write(self, data: bytes) -> None:
        self._content = bytes(data)


def write_to_clipboard(
    backend: ClipboardBackend,
    data: bytes,
    timeout: float = WRITE_TIMEOUT,
    interval: float = WATCH_INTERVAL,
) -> None:
    """Write *data* to *backend* and wait until the clipboard reflects it.

    Raises ClipboardError on timeout or if another writer replaced the data.
    """
    data = bytes(data)
    last = backend.read()
    if last == data:
        return
    backend.write(data)

    deadline = time.monotonic() + timeout
    while True:
        time.sleep(interval)
        if time.monotonic() >= deadline:
            raise ClipboardError("unable to write data to clipboard: timeout reached")
        current = backend.read()
        if current is None or current == last:
            continue
        if current != data:
            raise ClipboardError(
                "clipboard has been overwritten by others and data is lost"
            )
        return