"""TOTP verification (RFC 6238) with one time-step of clock-skew tolerance."""

from __future__ import annotations

import logging
import time

from pyotp.utils import strings_equal

from twofactor import base32
from twofactor.config import ConfigOverride, resolve_config
from twofactor.errors import MalformedSecretError
from twofactor.hotp import hotp
from twofactor.models import TotpConfig, TotpToken, TotpVerification

logger = logging.getLogger(__name__)

# Steps accepted on either side of the current one (+-30 s at the default period).
VALID_WINDOW = 1


def _secret_key(secret: str) -> bytes:
    key = base32.decode(secret)
    if not key:
        logger.warning("TOTP secret decoded to zero bytes")
        raise MalformedSecretError("TOTP secret does not decode to any key material")
    return key


def _now_seconds(now: float | None) -> int:
    return int(time.time() if now is None else now)


def code_at(key: bytes, step: int, config: TotpConfig) -> str:
    return hotp(key, step, config.algorithm, config.digits)


def generate_token(
    secret: str,
    config_override: ConfigOverride | None = None,
    now: float | None = None,
) -> TotpToken:
    """The code an authenticator shows at ``now`` and how long it stays current."""
    config = resolve_config(config_override)
    key = _secret_key(secret)
    seconds = _now_seconds(now)
    step = seconds // config.period
    return TotpToken(
        code=code_at(key, step, config),
        step=step,
        seconds_remaining=config.period - seconds % config.period,
    )


def verify(
    secret: str,
    submitted_code: str,
    config_override: ConfigOverride | None = None,
    now: float | None = None,
) -> TotpVerification:
    """Check a submitted code against the steps before, at and after ``now``.

    A wrong code is a normal ``is_valid=False`` result. Raises
    MalformedSecretError only when ``secret`` holds no key material.
    """
    config = resolve_config(config_override)
    key = _secret_key(secret)
    seconds = _now_seconds(now)
    current_step = seconds // config.period

    for step in range(current_step - VALID_WINDOW, current_step + VALID_WINDOW + 1):
        if step < 0:
            continue
        if strings_equal(code_at(key, step, config), submitted_code):
            logger.debug("TOTP code matched step %d (current %d)", step, current_step)
            return TotpVerification(
                submitted_code=submitted_code,
                is_valid=True,
                seconds_remaining=config.period - seconds % config.period,
                matched_step=step,
            )

    logger.debug(
        "TOTP code did not match steps %d..%d",
        current_step - VALID_WINDOW, current_step + VALID_WINDOW,
    )
    return TotpVerification(submitted_code=submitted_code, is_valid=False, seconds_remaining=0)
