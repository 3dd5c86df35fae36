"""HOTP (RFC 4226) and TOTP (RFC 6238) one-time password generation."""

from __future__ import annotations

import hashlib
import hmac
import time
from datetime import datetime

DEFAULT_INTERVAL = 30
DEFAULT_DIGITS = 6
T0 = 0  # Unix time at which time steps start

_UINT64_LIMIT = 1 << 64


class OTPError(ValueError):
    """Raised for invalid one-time password parameters."""


def _unix_seconds(when: datetime | float | int | None) -> int:
    if when is None:
        return int(time.time())
    if isinstance(when, datetime):
        return int(when.timestamp() // 1)
    return int(when // 1)


def totp(
    secret: bytes,
    when: datetime | float | int | None = None,
    interval: int = DEFAULT_INTERVAL,
    digits: int = DEFAULT_DIGITS,
    digestmod=None,
) -> str:
    """Return the TOTP value for *secret* at *when* (default: now).

    *when* may be a datetime or a Unix timestamp. The hash defaults to SHA-1.
    """
    if interval < 1:
        raise OTPError(
            "interval value must be greater than 0. RFC suggests as default 30"
        )
    count = ((_unix_seconds(when) - T0) // interval) % _UINT64_LIMIT
    return hotp(secret, count, digits, digestmod)


def hotp(
    key: bytes,
    count: int,
    digits: int = DEFAULT_DIGITS,
    digestmod=None,
) -> str:
    """Return the HOTP value for *key* and counter *count*.

    The hash defaults to SHA-1.
    """
    if digits < 1:
        raise OTPError(
            "digits value must be greater than 0. "
            "RFC suggests it must be at least a 6-digit value"
        )
    if not 0 <= count < _UINT64_LIMIT:
        raise OTPError("count must be an unsigned 64-bit integer")
    mac = hmac.new(
        bytes(key), count.to_bytes(8, "big"), digestmod or hashlib.sha1
    ).digest()
    offset = mac[-1] & 0x0F
    code = int.from_bytes(mac[offset : offset + 4], "big") & 0x7FFFFFFF
    return str(code % 10**digits).zfill(digits)