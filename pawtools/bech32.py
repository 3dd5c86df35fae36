"""Bech32 encoding and decoding (BIP 173 checksum, arbitrary-length HRP)."""

from __future__ import annotations

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
MAX_LENGTH = 90

_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


class Bech32Error(ValueError):
    """Raised when a string or payload cannot be Bech32 encoded or decoded."""


def _polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    raw = hrp.lower().encode("latin-1", errors="replace")
    return [c >> 5 for c in raw] + [0] + [c & 31 for c in raw]


def _verify_checksum(hrp: str, data: list[int]) -> bool:
    return _polymod(_hrp_expand(hrp) + data) == 1


def _create_checksum(hrp: str, data: list[int]) -> list[int]:
    mod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    return [(mod >> (5 * (5 - p))) & 31 for p in range(6)]


def _convert_bits(data, frombits: int, tobits: int, pad: bool) -> list[int]:
    result: list[int] = []
    acc = 0
    bits = 0
    maxv = (1 << tobits) - 1
    for idx, value in enumerate(data):
        if value >> frombits:
            raise Bech32Error(
                f"invalid data range: data[{idx}]={value} (frombits={frombits})"
            )
        acc = ((acc << frombits) | value) & 0xFFFFFFFF
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            result.append((acc >> bits) & maxv)
    if pad:
        if bits > 0:
            result.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise Bech32Error("illegal zero padding")
    elif (acc << (tobits - bits)) & maxv:
        raise Bech32Error("non-zero padding")
    return result


def _check_hrp_chars(hrp: str, message: str) -> None:
    for pos, char in enumerate(hrp):
        code = ord(char)
        if code < 33 or code > 126:
            raise Bech32Error(f"{message}: hrp[{pos}]={code}")


def encode(hrp: str, data: bytes) -> str:
    """Encode *data* under the human-readable part *hrp*.

    An uppercase HRP yields an uppercase result.
    """
    values = _convert_bits(bytes(data), 8, 5, True)
    if len(hrp) + len(values) + 7 > MAX_LENGTH:
        raise Bech32Error(
            f"too long: hrp length={len(hrp)}, data length={len(values)}"
        )
    if not hrp:
        raise Bech32Error(f"invalid HRP: {hrp!r}")
    _check_hrp_chars(hrp, "invalid HRP character")
    lower = hrp.lower() == hrp
    if hrp.upper() != hrp and not lower:
        raise Bech32Error(f"mixed case HRP: {hrp!r}")
    hrp = hrp.lower()
    body = "".join(CHARSET[v] for v in values + _create_checksum(hrp, values))
    encoded = f"{hrp}1{body}"
    return encoded if lower else encoded.upper()


def decode(s: str) -> tuple[str, bytes]:
    """Decode a Bech32 string into its HRP and payload bytes."""
    if len(s) > MAX_LENGTH:
        raise Bech32Error(f"too long: len={len(s)}")
    if s.lower() != s and s.upper() != s:
        raise Bech32Error("mixed case")
    pos = s.rfind("1")
    if pos < 1 or pos + 7 > len(s):
        raise Bech32Error(
            f"separator '1' at invalid position: pos={pos}, len={len(s)}"
        )
    hrp = s[:pos]
    _check_hrp_chars(hrp, "invalid character human-readable part")
    data: list[int] = []
    for offset, char in enumerate(s[pos + 1 :].lower()):
        index = CHARSET.find(char)
        if index == -1:
            raise Bech32Error(
                f"invalid character data part: s[{offset}]={ord(char)}"
            )
        data.append(index)
    if not _verify_checksum(hrp, data):
        raise Bech32Error("invalid checksum")
    return hrp, bytes(_convert_bits(data[:-6], 5, 8, False))