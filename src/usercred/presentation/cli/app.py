"""usercred CLI application using Typer.

Thin shell over AccountService: every command builds a connection provider
from the validated settings, calls one use-case and renders the result.
Domain errors are printed and turned into exit code 1.
"""

import logging
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from typing import Optional

import typer
from pydantic import ValidationError as SettingsValidationError
from rich.console import Console

from usercred.application.services import AccountService
from usercred.domain.accounts import Credential, User
from usercred.domain.shared.exceptions import DomainException
from usercred.infrastructure.persistence.sqlalchemy import (
    ConnectionProvider,
    create_tables,
    reset_tables,
    translate_database_errors,
)
from usercred.presentation.cli.rendering import user_detail_table, users_table
from usercred_config import Settings, get_settings

app = typer.Typer(
    name="usercred",
    help="usercred - user accounts and access credentials",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
users_app = typer.Typer(
    name="users",
    help="Create, list, update and delete users",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(users_app)


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure logging once per process from the settings' log level."""
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("usercred").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except SettingsValidationError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except DomainException as exc:
        console.print(f"[bold red]Error:[/bold red] {exc.message}")
        raise typer.Exit(code=1) from exc


@contextmanager
def _provider() -> Iterator[ConnectionProvider]:
    provider = ConnectionProvider.from_settings(_load_settings())
    try:
        yield provider
    finally:
        provider.dispose()


@contextmanager
def _account_service() -> Iterator[AccountService]:
    with _provider() as provider:
        yield AccountService.from_provider(provider)


def _require_user(service: AccountService, user_id: int) -> User:
    user = service.get_by_id(user_id)
    if user is None:
        console.print(f"[yellow]No user with ID {user_id}.[/yellow]")
        raise typer.Exit(code=1)
    return user


@app.callback()
def main() -> None:
    """Load settings (fails fast when incomplete) and set up logging."""
    _configure_logging(_load_settings().log_level)


# ---------------------------------------------------------------------------
# db
# ---------------------------------------------------------------------------


@db_app.command("init")
def db_init() -> None:
    """Create the usuario and credencial tables if they are missing."""
    with _handle_errors(), _provider() as provider, translate_database_errors():
        create_tables(provider.engine)
    console.print("[green]Database schema is ready.[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all tables (deletes all data)."""
    if not force:
        console.print("[yellow]WARNING: This will DELETE ALL DATA![/yellow]")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    with _handle_errors(), _provider() as provider, translate_database_errors():
        reset_tables(provider.engine)
    console.print("[green]Database recreated.[/green]")


# ---------------------------------------------------------------------------
# users
# ---------------------------------------------------------------------------


@users_app.command("create")
def users_create(
    first_name: str = typer.Option(..., prompt="First name"),
    last_name: str = typer.Option(..., prompt="Last name"),
    username: str = typer.Option(..., prompt="Username"),
    email: str = typer.Option(..., prompt="Email"),
    password_hash: str = typer.Option(
        ...,
        prompt="Password hash",
        hide_input=True,
        help="Pre-computed password hash, stored as given",
    ),
    salt: Optional[str] = typer.Option(
        None,
        help="Salt stored next to the hash (random when omitted)",
    ),
) -> None:
    """Create a user together with its credential."""
    user = User(
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        username=username.strip(),
        email=email.strip(),
    )
    credential = Credential(
        hash_password=password_hash,
        salt=salt or secrets.token_hex(16),
    )

    with _handle_errors(), _account_service() as service:
        service.create_with_credential(user, credential)

    console.print(
        f"[green]User '{user.username}' created with ID {user.id}.[/green]",
    )


@users_app.command("list")
def users_list() -> None:
    """List all users with their credential."""
    with _handle_errors(), _account_service() as service:
        users = service.get_all()

    if not users:
        console.print("[yellow]No users found.[/yellow]")
        return
    console.print(users_table(users))


@users_app.command("find")
def users_find(username: str = typer.Argument(..., help="Username to look up")) -> None:
    """Find a user by username."""
    with _handle_errors(), _account_service() as service:
        user = service.get_by_username(username)

    if user is None:
        console.print(f"[yellow]No user found with username '{username}'.[/yellow]")
        raise typer.Exit(code=1)
    console.print(user_detail_table(user))


@users_app.command("show")
def users_show(user_id: int = typer.Argument(..., help="User ID")) -> None:
    """Show a user by ID."""
    with _handle_errors(), _account_service() as service:
        user = _require_user(service, user_id)
    console.print(user_detail_table(user))


@users_app.command("update")
def users_update(
    user_id: int = typer.Argument(..., help="User ID"),
    first_name: Optional[str] = typer.Option(None, help="New first name"),
    last_name: Optional[str] = typer.Option(None, help="New last name"),
    username: Optional[str] = typer.Option(None, help="New username"),
    email: Optional[str] = typer.Option(None, help="New email"),
    active: Optional[bool] = typer.Option(
        None,
        "--active/--inactive",
        help="Activate or deactivate the user",
    ),
) -> None:
    """Update a user's fields; options left out (or blank) keep their value."""
    with _handle_errors(), _account_service() as service:
        user = _require_user(service, user_id)

        for attribute, value in (
            ("first_name", first_name),
            ("last_name", last_name),
            ("username", username),
            ("email", email),
        ):
            if value is not None and value.strip():
                setattr(user, attribute, value.strip())
        if active is not None:
            user.active = active

        service.update(user)

    console.print(f"[green]User ID {user_id} updated.[/green]")


@users_app.command("delete")
def users_delete(
    user_id: int = typer.Argument(..., help="User ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Soft-delete (and deactivate) a user."""
    with _handle_errors(), _account_service() as service:
        user = _require_user(service, user_id)

        if not yes:
            console.print("[yellow]You are about to delete:[/yellow]")
            console.print(user_detail_table(user))
            if not typer.confirm("Are you sure?"):
                console.print("Deletion cancelled.")
                return

        service.soft_delete(user_id)

    console.print(f"[green]User {user.username} (ID {user_id}) deleted.[/green]")


@users_app.command("credential")
def users_credential(
    user_id: int = typer.Argument(..., help="User ID"),
    password_hash: str = typer.Option(
        ...,
        prompt="New password hash",
        hide_input=True,
        help="Pre-computed password hash, stored as given",
    ),
    salt: Optional[str] = typer.Option(
        None,
        help="Salt stored next to the hash (random when omitted)",
    ),
    require_reset: bool = typer.Option(
        False,
        "--require-reset/--no-require-reset",
        help="Force a password change on next login",
    ),
) -> None:
    """Replace a user's password hash and salt."""
    with _handle_errors(), _account_service() as service:
        credential = service.change_credential(
            user_id,
            hash_password=password_hash,
            salt=salt or secrets.token_hex(16),
            require_reset=require_reset,
        )

    console.print(
        f"[green]Credential #{credential.id} of user {user_id} updated.[/green]",
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
