"""userhub CLI application using Typer.

This module provides command-line utilities for the userhub backend:
running the API server, managing the database schema, seeding development
data and generating secrets for deployment configuration.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from userhub.domain.user import User
from userhub.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from userhub.infrastructure.persistence.sqlalchemy.database import display_url
from userhub.infrastructure.persistence.sqlalchemy.seeder import (
    DEFAULT_PASSWORD,
    seed_users,
)
from userhub_auth import PasswordHashingService
from userhub_config.settings import Settings, get_settings

app = typer.Typer(
    name="userhub",
    help="userhub - user management REST API CLI",
    no_args_is_help=True,
)
console = Console()


# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema and seed data",
    no_args_is_help=True,
)
app.add_typer(db_app)

# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "userhub.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


async def _migrate(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _drop(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await drop_tables(engine)
    finally:
        await engine.dispose()


async def _seed(settings: Settings) -> list[User]:
    engine = create_engine(settings)
    try:
        await create_tables(engine)
        session_maker = create_session_maker(engine)
        async with session_maker() as session:
            return await seed_users(
                session,
                PasswordHashingService(rounds=settings.bcrypt_rounds),
            )
    finally:
        await engine.dispose()


@db_app.command("migrate")
def db_migrate() -> None:
    """Create missing tables (idempotent)."""
    settings = get_settings()
    console.print(f"Database: [bold]{display_url(settings.database_url)}[/bold]")
    asyncio.run(_migrate(settings))
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop all tables (DELETES ALL DATA)."""
    settings = get_settings()
    console.print(f"Database: [bold]{display_url(settings.database_url)}[/bold]")

    if not yes:
        console.print("[red]WARNING: This will DELETE ALL DATA in the database![/red]")
        if not typer.confirm("Continue?", default=False):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(_drop(settings))
    console.print("[green]Database tables dropped.[/green]")


@db_app.command("seed")
def db_seed() -> None:
    """Create the schema if needed and insert the development users."""
    settings = get_settings()
    console.print(f"Database: [bold]{display_url(settings.database_url)}[/bold]")

    created = asyncio.run(_seed(settings))

    if not created:
        console.print("[yellow]Nothing to seed, all users already exist.[/yellow]")
        return

    table = Table(title="Seeded users")
    table.add_column("ID", justify="right")
    table.add_column("Email")
    table.add_column("Role")
    for user in created:
        table.add_row(str(user.id), user.email, user.role)
    console.print(table)
    console.print(f"[dim]Password for all seeded users: {DEFAULT_PASSWORD}[/dim]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for userhub configuration.

    Generates:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]userhub Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # Generate JWT secret (64 bytes, url-safe, for strong HS256)
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    # Generate database password (32 bytes = strong random password)
    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
