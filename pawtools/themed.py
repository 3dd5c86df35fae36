"""Resources that pick a dark or light variant from the foreground colour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_LIGHT_THRESHOLD = 0xAAAA


@dataclass(frozen=True)
class Resource:
    """A named static resource."""

    name: str
    content: bytes


def _premultiplied16(component: int, alpha: int) -> int:
    value = component | (component << 8)
    return value * alpha // 0xFF


def is_light(foreground: Sequence[int]) -> bool:
    """Return True when the 8-bit RGB(A) *foreground* colour is dark.

    A dark foreground means a light theme is in use.
    """
    red, green, blue = foreground[:3]
    alpha = foreground[3] if len(foreground) > 3 else 0xFF
    return all(
        _premultiplied16(c, alpha) < _LIGHT_THRESHOLD for c in (red, green, blue)
    )


@dataclass(frozen=True)
class ThemedResource:
    """A pair of resources for dark and light themes."""

    dark: Resource
    light: Resource

    def select(self, foreground: Sequence[int]) -> Resource:
        return self.light if is_light(foreground) else self.dark

    def name(self, foreground: Sequence[int]) -> str:
        return self.select(foreground).name

    def content(self, foreground: Sequence[int]) -> bytes:
        return self.select(foreground).content