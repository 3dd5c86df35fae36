import hashlib
from datetime import datetime, timezone

import pytest

from pawtools.otp import OTPError, hotp, totp

RFC_SEED = b"12345678901234567890"


@pytest.mark.parametrize("count, expected", [(0, "755224"), (1, "287082")])
def test_hotp_reference_values(count, expected):
    assert hotp(RFC_SEED, count) == expected


def test_totp_reference_value():
    assert totp(RFC_SEED, 59, digits=8) == "94287082"


def test_totp_matches_hotp_of_time_step():
    assert totp(RFC_SEED, 1_111_111_109) == hotp(RFC_SEED, 1_111_111_109 // 30)


def test_totp_accepts_datetime():
    moment = datetime.fromtimestamp(1_234_567_890, tz=timezone.utc)
    assert totp(RFC_SEED, moment) == totp(RFC_SEED, 1_234_567_890)


def test_totp_same_step_same_value():
    assert totp(RFC_SEED, 60) == totp(RFC_SEED, 89)


def test_totp_custom_interval():
    assert totp(RFC_SEED, 600, interval=60) == hotp(RFC_SEED, 10)


@pytest.mark.parametrize("digits", [1, 4, 6, 8, 9])
def test_hotp_length_matches_digits(digits):
    for count in range(20):
        value = hotp(RFC_SEED, count, digits)
        assert len(value) == digits
        assert value.isdigit()


def test_hotp_shorter_is_suffix_of_longer():
    assert hotp(RFC_SEED, 3, 8).endswith(hotp(RFC_SEED, 3, 6))


def test_hotp_default_digestmod_is_sha1():
    assert hotp(RFC_SEED, 5, 6, hashlib.sha1) == hotp(RFC_SEED, 5)


def test_hotp_rejects_zero_digits():
    with pytest.raises(OTPError, match="digits"):
        hotp(RFC_SEED, 0, 0)


def test_hotp_rejects_negative_count():
    with pytest.raises(OTPError):
        hotp(RFC_SEED, -1)


def test_totp_rejects_zero_interval():
    with pytest.raises(OTPError, match="interval"):
        totp(RFC_SEED, 59, interval=0)