"""LaunchHub admin CLI using Typer.

This module provides command-line utilities for operating the identity
store: schema management and basic user administration.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncEngine

from launchhub_config import Settings, configure_logging, get_settings
from launchhub_identity.application.services import UserService
from launchhub_identity.domain.shared.exceptions import DomainException
from launchhub_identity.domain.user import User, UserRole
from launchhub_identity.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyIdentityUnitOfWork,
    create_engine_from_settings,
    create_session_maker,
    create_tables,
    drop_tables,
)
from launchhub_identity.services import PasswordHashingService

T = TypeVar("T")

app = typer.Typer(
    name="launchhub",
    help="LaunchHub - identity administration CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
users_app = typer.Typer(
    name="users",
    help="User administration",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(users_app)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    configure_logging()


def _run_with_engine(operation: Callable[[AsyncEngine, Settings], Awaitable[T]]) -> T:
    """Run ``operation`` on a fresh engine; domain errors end the command."""
    settings = get_settings()

    async def runner() -> T:
        engine = create_engine_from_settings(settings)
        try:
            return await operation(engine, settings)
        finally:
            await engine.dispose()

    try:
        return asyncio.run(runner())
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e


def _user_service(engine: AsyncEngine, settings: Settings) -> UserService:
    session_maker = create_session_maker(engine)
    return UserService(
        lambda: SQLAlchemyIdentityUnitOfWork(
            session_maker,
            timeout=settings.database_timeout_seconds,
        ),
        PasswordHashingService(rounds=settings.password_hash_rounds),
    )


def _run(operation: Callable[[UserService], Awaitable[T]]) -> T:
    """Run ``operation`` against a freshly wired UserService."""
    return _run_with_engine(
        lambda engine, settings: operation(_user_service(engine, settings)),
    )


def _run_schema(action: Callable[[AsyncEngine], Awaitable[None]]) -> None:
    _run_with_engine(lambda engine, _settings: action(engine))


@db_app.command("init")
def init_db() -> None:
    """Create all identity tables (existing tables are left alone)."""
    _run_schema(create_tables)
    console.print("[green]✓[/green] Database tables created")


@db_app.command("drop")
def drop_db(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Drop without asking for confirmation",
    ),
) -> None:
    """Drop all identity tables. All data is lost."""
    if not force:
        typer.confirm("Drop all identity tables?", abort=True)
    _run_schema(drop_tables)
    console.print("[yellow]Database tables dropped[/yellow]")


@users_app.command("create")
def create_user(
    email: str = typer.Argument(..., help="Email address of the new user"),
    role: UserRole = typer.Option(
        UserRole.CLIENT,
        "--role",
        "-r",
        case_sensitive=False,
        help="Account role",
    ),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
) -> None:
    """Create a user account."""
    user = _run(lambda service: service.create_user(email, password, role))
    console.print(
        f"[green]✓[/green] Created user [bold]{user.id}[/bold] "
        f"({user.email}, {user.role.value})"
    )


@users_app.command("list")
def list_users(
    active_only: bool = typer.Option(
        False,
        "--active-only",
        help="Hide deactivated users",
    ),
) -> None:
    """List user accounts in creation order."""
    users = _run(lambda service: service.list_users(include_inactive=not active_only))
    if not users:
        console.print("[dim]No users found[/dim]")
        return
    console.print(_users_table(users))


@users_app.command("set-email")
def set_email(
    user_id: int = typer.Argument(..., help="Id of the user"),
    email: str = typer.Argument(..., help="New email address"),
) -> None:
    """Move a user to a new email address."""
    user = _run(lambda service: service.change_email(user_id, email))
    console.print(f"[green]✓[/green] User {user.id} now uses {user.email}")


@users_app.command("deactivate")
def deactivate_user(
    user_id: int = typer.Argument(..., help="Id of the user"),
) -> None:
    """Deactivate (soft delete) a user."""
    user = _run(lambda service: service.deactivate_user(user_id))
    console.print(f"[yellow]User {user.id} ({user.email}) deactivated[/yellow]")


@users_app.command("delete")
def delete_user(
    user_id: int = typer.Argument(..., help="Id of the user"),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Delete without asking for confirmation",
    ),
) -> None:
    """Permanently delete a user and its freelancer profile."""
    if not yes:
        typer.confirm(f"Permanently delete user {user_id}?", abort=True)
    _run(lambda service: service.delete_user(user_id))
    console.print(f"[green]✓[/green] Deleted user {user_id}")


def _users_table(users: list[User]) -> Table:
    table = Table(title="Users")
    table.add_column("ID", justify="right")
    table.add_column("Email")
    table.add_column("Role")
    table.add_column("Active")
    table.add_column("Created")
    for user in users:
        table.add_row(
            str(user.id),
            user.email,
            user.role.value,
            "yes" if user.is_active else "no",
            user.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    return table


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
