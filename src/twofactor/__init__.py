"""TwoFactor: TOTP provisioning, verification and backup codes."""

from twofactor.backup_codes import generate_new_backup_codes, verify_backup_code
from twofactor.engine import TotpEngine
from twofactor.errors import MalformedSecretError, SecretGenerationError, TwoFactorError
from twofactor.models import (
    Algorithm,
    BackupCodeVerification,
    TotpConfig,
    TotpConfigOverride,
    TotpSecret,
    TotpToken,
    TotpVerification,
)
from twofactor.provisioning import generate_secret
from twofactor.verifier import generate_token, verify

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "BackupCodeVerification",
    "MalformedSecretError",
    "SecretGenerationError",
    "TotpConfig",
    "TotpConfigOverride",
    "TotpEngine",
    "TotpSecret",
    "TotpToken",
    "TotpVerification",
    "TwoFactorError",
    "generate_new_backup_codes",
    "generate_secret",
    "generate_token",
    "verify",
    "verify_backup_code",
]
