"""Favicon downloader options and entry point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

DEFAULT_MIN_SIZE = 32


class FaviconError(RuntimeError):
    """Raised when no favicon could be obtained."""


@dataclass
class FaviconOptions:
    """Settings for a favicon download.

    ``service`` maps a host to the URL of a third-party favicon service.
    """

    client: Any = None
    min_size: int = DEFAULT_MIN_SIZE
    force_min_size: bool = False
    service: Optional[Callable[[str], str]] = None


def download(host: str, options: FaviconOptions | None = None):
    """Try to obtain the highest-resolution favicon for *host*.

    No location currently yields an icon, so this always raises FaviconError.
    """
    options = options or FaviconOptions()
    raise FaviconError("could not found any favicon at default locations")