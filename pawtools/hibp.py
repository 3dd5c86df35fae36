"""Check passwords against the Pwned Passwords range API (k-anonymity)."""

from __future__ import annotations

import hashlib
import urllib.error
import urllib.request

API_URL = "https://api.pwnedpasswords.com/range/{}"
DEFAULT_TIMEOUT = 10.0


class PwnedCheckError(RuntimeError):
    """Raised when the breach lookup fails or returns malformed data."""


class UrllibClient:
    """Minimal HTTP client returning response bodies as text."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def get(self, url: str) -> str:
        """Fetch *url* and return its body, raising PwnedCheckError on failure."""
        request = urllib.request.Request(url, headers={"User-Agent": "pawtools"})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                if response.status != 200:
                    raise PwnedCheckError(
                        f"unexpected response status: {response.status}"
                    )
                return response.read().decode("utf-8")
        except (urllib.error.URLError, OSError) as exc:
            raise PwnedCheckError(f"could not query the breach API: {exc}") from exc


def check_password(password: str, client=None) -> tuple[bool, int]:
    """Return whether *password* appears in known breaches and how often.

    Only the first five hex characters of its SHA-1 digest are sent.
    """
    client = client or UrllibClient()
    digest = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    prefix, suffix = digest[:5], digest[5:]
    body = client.get(API_URL.format(prefix))
    for line in body.splitlines():
        entry, _, raw_count = line.strip().partition(":")
        if entry.upper() != suffix:
            continue
        try:
            count = int(raw_count)
        except ValueError as exc:
            raise PwnedCheckError(f"malformed response line: {line!r}") from exc
        return count > 0, count
    return False, 0