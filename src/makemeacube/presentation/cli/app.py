"""MakeMeACube CLI application using Typer.

Administrative entry point: database schema management and account
registration without going through a transport layer.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from functools import lru_cache
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from makemeacube.application.commands.registration import (
    BasicUserRegistrationCommand,
    MakerUserRegistrationCommand,
    VerifyUserEmailCommand,
)
from makemeacube.application.dtos.user import (
    AddressInformationDTO,
    BasicUserRegistrationDTO,
    MakerUserRegistrationDTO,
    UserDTO,
)
from makemeacube.domain.shared.exceptions import DomainException
from makemeacube.domain.user import User
from makemeacube.infrastructure.email import EmailVerificationNotifier
from makemeacube.infrastructure.persistence.sqlalchemy import (
    create_tables,
    get_engine,
    reset_tables,
    session_scope,
)
from makemeacube.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from makemeacube.infrastructure.security import PasswordHashingService
from makemeacube_config.settings import get_settings

T = TypeVar("T")

app = typer.Typer(
    name="makemeacube",
    help="MakeMeACube - maker account management CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

users_app = typer.Typer(
    name="users",
    help="Account registration",
    no_args_is_help=True,
)
app.add_typer(users_app)


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the level taken from
    settings, WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )
    logging.getLogger("makemeacube").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@app.callback()
def main() -> None:
    configure_logging()


def _run(operation: Callable[[], Awaitable[T]]) -> T:
    async def _with_engine() -> T:
        try:
            return await operation()
        finally:
            await get_engine().dispose()

    try:
        return asyncio.run(_with_engine())
    except DomainException as e:
        console.print(f"[red]Error ({e.code.value}):[/red] {e.message}")
        raise typer.Exit(code=1) from e


def _database_display() -> str:
    url = get_settings().database_url
    # Hide credentials
    return url.split("@")[-1] if "@" in url else url


def _print_user(user: User) -> None:
    dto = UserDTO.from_domain(user)
    table = Table(show_header=False)
    table.add_row("id", str(dto.id))
    table.add_row("email", dto.email)
    table.add_row("pseudo", dto.pseudo)
    table.add_row("maker", "yes" if dto.is_maker else "no")
    table.add_row("status", dto.registration_status)
    for address in dto.addresses:
        table.add_row("address", f"{address.address}, {address.city}")
    console.print(table)


# -----------------------------------------------------------------------------
# db
# -----------------------------------------------------------------------------


@db_app.command("init")
def db_init() -> None:
    """Create missing database tables."""
    console.print(f"Database: [bold]{_database_display()}[/bold]")
    _run(create_tables)
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all database tables."""
    console.print(f"Database: [bold]{_database_display()}[/bold]")
    if not force:
        console.print("[yellow]This will DELETE ALL DATA in the database![/yellow]")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    _run(reset_tables)
    console.print("[green]Database recreated.[/green]")


# -----------------------------------------------------------------------------
# users
# -----------------------------------------------------------------------------


def _password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=get_settings().password_hash_rounds)


@users_app.command("register")
def users_register(
    email: str = typer.Option(..., "--email", help="Login email"),
    pseudo: str = typer.Option(..., "--pseudo", help="Public display name"),
    password: str = typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
) -> None:
    """Register a basic user."""

    async def _register() -> User:
        async with session_scope() as session:
            command = BasicUserRegistrationCommand(
                user_repository=UserRepositorySQLAlchemy(session),
                password_service=_password_service(),
                notifier=EmailVerificationNotifier(get_settings()),
            )
            return await command.execute(
                BasicUserRegistrationDTO(mail=email, pseudo=pseudo, password=password),
            )

    user = _run(_register)
    console.print("[green]User registered.[/green]")
    _print_user(user)


@users_app.command("register-maker")
def users_register_maker(  # NOQA: PLR0913
    email: str = typer.Option(..., "--email"),
    pseudo: str = typer.Option(..., "--pseudo"),
    first_name: str = typer.Option(..., "--first-name"),
    last_name: str = typer.Option(..., "--last-name"),
    phone: str = typer.Option(..., "--phone"),
    description: str = typer.Option(..., "--description"),
    address: str = typer.Option(..., "--address"),
    city: str = typer.Option(..., "--city"),
    country: str = typer.Option(..., "--country"),
    postal_code: str = typer.Option(..., "--postal-code"),
    password: str = typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
) -> None:
    """Register a maker together with their first address."""
    registration = MakerUserRegistrationDTO(
        mail=email,
        pseudo=pseudo,
        password=password,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        maker_description=description,
        address=AddressInformationDTO(
            address=address,
            city=city,
            country=country,
            postal_code=postal_code,
        ),
    )

    async def _register() -> User:
        async with session_scope() as session:
            command = MakerUserRegistrationCommand(
                user_repository=UserRepositorySQLAlchemy(session),
                password_service=_password_service(),
                notifier=EmailVerificationNotifier(get_settings()),
            )
            return await command.execute(registration)

    user = _run(_register)
    console.print("[green]Maker registered.[/green]")
    _print_user(user)


@users_app.command("verify")
def users_verify(user_id: int = typer.Argument(..., help="User identifier")) -> None:
    """Mark a user's email as verified."""

    async def _verify() -> User:
        async with session_scope() as session:
            command = VerifyUserEmailCommand(UserRepositorySQLAlchemy(session))
            return await command.execute(user_id)

    user = _run(_verify)
    console.print(f"[green]User {user.id} is verified.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
