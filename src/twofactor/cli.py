"""CLI entry point for TwoFactor."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from twofactor.models import Algorithm

console = Console()

_ALGORITHMS = click.Choice([a.value for a in Algorithm], case_sensitive=False)


def _override(
    profile: str | None = None,
    issuer: str | None = None,
    algorithm: str | None = None,
    digits: int | None = None,
    period: int | None = None,
) -> dict:
    from twofactor.config import load_profile

    fields: dict = {}
    if profile:
        fields.update(load_profile(profile).model_dump(exclude_none=True))
    explicit = {
        "issuer": issuer,
        "algorithm": algorithm.upper() if algorithm else None,
        "digits": digits,
        "period": period,
    }
    fields.update({k: v for k, v in explicit.items() if v is not None})
    return fields


def _to_int(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    return int(value) if value else None


def _code_options(f):
    f = click.option("--period", type=click.IntRange(min=1), help="Time-step in seconds")(f)
    f = click.option("--digits", type=click.Choice(["6", "8"]), callback=_to_int)(f)
    f = click.option("--algorithm", type=_ALGORITHMS)(f)
    f = click.option("--profile", help="Named config profile")(f)
    return f


@click.group()
def main() -> None:
    """TwoFactor: TOTP provisioning and verification."""
    from twofactor.config import settings

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


@main.command()
def status() -> None:
    """Show the configured defaults."""
    from twofactor.config import load_all_profiles, settings

    console.print("[bold]TwoFactor Defaults[/bold]")
    console.print(f"  Issuer: {settings.default_issuer}")
    console.print(f"  Algorithm: {settings.default_algorithm}")
    console.print(f"  Digits: {settings.default_digits}")
    console.print(f"  Period: {settings.default_period}s")
    console.print(f"  Profiles: {', '.join(load_all_profiles()) or '(none)'}")


@main.command()
@click.argument("label")
@click.option("--issuer", help="Issuer shown in the authenticator app")
@_code_options
def enroll(
    label: str,
    issuer: str | None,
    profile: str | None,
    algorithm: str | None,
    digits: int | None,
    period: int | None,
) -> None:
    """Generate a secret, provisioning URI and backup codes for LABEL."""
    from twofactor.provisioning import generate_secret

    try:
        result = generate_secret(label, _override(profile, issuer, algorithm, digits, period))
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    console.print(f"[bold]Secret:[/bold] {result.secret}")
    console.print(f"[bold]Manual entry key:[/bold] {result.manual_entry_key}")
    console.print(f"[bold]Provisioning URI:[/bold] {result.provisioning_uri}", soft_wrap=True)
    console.print("[bold]Backup codes:[/bold]")
    for code in result.backup_codes:
        console.print(f"  {code}")


@main.command()
@click.argument("secret")
@_code_options
def code(
    secret: str,
    profile: str | None,
    algorithm: str | None,
    digits: int | None,
    period: int | None,
) -> None:
    """Show the current code for SECRET."""
    from twofactor.errors import MalformedSecretError
    from twofactor.verifier import generate_token

    try:
        token = generate_token(secret, _override(profile, None, algorithm, digits, period))
    except (MalformedSecretError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(2)
    console.print(f"{token.code}  [dim]({token.seconds_remaining}s left)[/dim]")


@main.command()
@click.argument("secret")
@click.argument("submitted_code")
@_code_options
def verify(
    secret: str,
    submitted_code: str,
    profile: str | None,
    algorithm: str | None,
    digits: int | None,
    period: int | None,
) -> None:
    """Check SUBMITTED_CODE against SECRET. Exits 1 when the code is wrong."""
    from twofactor.errors import MalformedSecretError
    from twofactor.verifier import verify as verify_code

    try:
        override = _override(profile, None, algorithm, digits, period)
        result = verify_code(secret, submitted_code, override)
    except (MalformedSecretError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(2)
    if result.is_valid:
        console.print(f"[green]Valid[/green] ({result.seconds_remaining}s left in window)")
    else:
        console.print("[red]Invalid[/red]")
        sys.exit(1)


@main.command()
def backup_codes() -> None:
    """Generate a fresh set of backup codes."""
    from twofactor.backup_codes import generate_new_backup_codes

    for c in generate_new_backup_codes():
        console.print(c)


@main.command()
@click.argument("slug")
def profile_info(slug: str) -> None:
    """Show a config profile."""
    from twofactor.config import load_profile

    try:
        profile = load_profile(slug)
        console.print_json(data=profile.model_dump(mode="json", exclude_none=True))
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
