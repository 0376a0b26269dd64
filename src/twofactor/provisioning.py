"""Enrollment material for a new TOTP setup: secret, otpauth:// URI and backup codes."""

from __future__ import annotations

import logging
import secrets
from urllib.parse import quote

from twofactor import base32
from twofactor.config import ConfigOverride, resolve_config
from twofactor.errors import SecretGenerationError
from twofactor.models import TotpConfig, TotpSecret

logger = logging.getLogger(__name__)

SECRET_BYTES = 20  # 160 bits, the HOTP/TOTP conventional key length
BACKUP_CODE_COUNT = 10
_BACKUP_CODE_BYTES = 5


def random_bytes(n: int) -> bytes:
    """Draw ``n`` bytes from the OS CSPRNG."""
    try:
        return secrets.token_bytes(n)
    except (NotImplementedError, OSError) as e:
        raise SecretGenerationError("Secure random source unavailable") from e


def generate_backup_codes(count: int = BACKUP_CODE_COUNT) -> list[str]:
    """Generate single-use backup codes formatted ``XXXX-XXXX`` (uppercase hex)."""
    codes = []
    for _ in range(count):
        raw = random_bytes(_BACKUP_CODE_BYTES).hex().upper()
        codes.append(f"{raw[:4]}-{raw[4:8]}")
    return codes


def build_provisioning_uri(secret: str, config: TotpConfig) -> str:
    """Build the otpauth:// URI authenticator apps import (usually via QR code)."""
    issuer = quote(config.issuer, safe="")
    label = quote(config.label, safe="")
    return (
        f"otpauth://totp/{issuer}:{label}"
        f"?secret={secret}"
        f"&issuer={issuer}"
        f"&algorithm={config.algorithm.value}"
        f"&digits={config.digits}"
        f"&period={config.period}"
    )


def generate_secret(label: str, config_override: ConfigOverride | None = None) -> TotpSecret:
    """Create a fresh secret, its provisioning URI and a set of backup codes.

    Nothing is stored; the caller persists ``secret`` and ``backup_codes``
    once the user has proven possession with a valid code.
    """
    config = resolve_config(config_override, label=label)
    secret = base32.encode(random_bytes(SECRET_BYTES))
    result = TotpSecret(
        secret=secret,
        provisioning_uri=build_provisioning_uri(secret, config),
        backup_codes=generate_backup_codes(),
        config=config,
    )
    logger.info(
        "Generated TOTP secret for %s (issuer=%s, %s/%d digits/%ds)",
        config.label, config.issuer, config.algorithm, config.digits, config.period,
    )
    return result
