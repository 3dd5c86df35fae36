"""Bech32, HOTP/TOTP, breached-password checks, ICO decoding, themed resources, clipboard writes and the paw-cli command."""

__version__ = "0.1.0"

__all__ = ["bech32", "otp", "hibp", "ico", "favicon", "themed", "clipboard", "cli", "main"]