"""TwoFactor CLI: ``python -m twofactor``.

Usage:
    python -m twofactor status                 # Show configured defaults
    python -m twofactor enroll alice@x.com     # New secret, URI and backup codes
    python -m twofactor code SECRET            # Current code and countdown
    python -m twofactor verify SECRET 123456   # Check a code (exit 1 if wrong)
    python -m twofactor backup-codes           # Fresh backup code set
    python -m twofactor profile-info SLUG      # Show a config profile
"""

from twofactor.cli import main

if __name__ == "__main__":
    main()
