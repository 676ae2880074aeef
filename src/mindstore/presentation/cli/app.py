"""MindStore CLI application using Typer.

Operational commands for the admin backend: database setup, seeding
categories and the first admin, issuing admin tokens and generating
deployment secrets.
"""

import asyncio
import logging
import secrets
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession

from mindstore.application.dtos import PersonCreateDTO
from mindstore.application.services import AdminService, RequestValidator
from mindstore.domain.shared.exceptions import DomainException
from mindstore.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    init_database,
    reset_database,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories import (
    AdminRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
)
from mindstore.infrastructure.security import JWTService, PasswordHashingService
from mindstore_config.settings import get_settings

T = TypeVar("T")

app = typer.Typer(
    name="mindstore",
    help="MindStore - admin backend CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(name="db", help="Database management", no_args_is_help=True)
category_app = typer.Typer(
    name="category",
    help="Catalog categories",
    no_args_is_help=True,
)
admin_app = typer.Typer(name="admin", help="Admin accounts", no_args_is_help=True)
token_app = typer.Typer(name="token", help="Access tokens", no_args_is_help=True)
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(category_app)
app.add_typer(admin_app)
app.add_typer(token_app)
app.add_typer(secrets_app)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def _db_display() -> str:
    url = get_settings().database_url
    return url.split("@")[-1] if "@" in url else url


async def _with_service(work: Callable[[AdminService], Awaitable[T]]) -> T:
    """Run ``work`` against a fresh session and commit on success."""
    settings = get_settings()
    engine = create_engine_from_settings()
    try:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            service = AdminService.from_factory(
                SQLAlchemyRepositoryFactory(session),
                password_hasher=PasswordHashingService(rounds=settings.bcrypt_rounds),
                request_validator=RequestValidator.from_settings(settings),
            )
            result = await work(service)
            await session.commit()
            return result
    finally:
        await engine.dispose()


def _run(coro: Awaitable[T]) -> T:
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message} ({e.code.value})")
        raise typer.Exit(code=1) from e


# -----------------------------------------------------------------------------
# db
# -----------------------------------------------------------------------------


@db_app.command("init")
def db_init() -> None:
    """Create missing tables and seed the USER and ADMIN roles."""
    console.print(f"Database: [bold]{_db_display()}[/bold]")
    asyncio.run(init_database())
    console.print("[green]Database initialized.[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all tables and recreate them (USE WITH CAUTION!)."""
    console.print(f"Database: [bold]{_db_display()}[/bold]")
    if not force:
        typer.confirm(
            "This will DELETE ALL DATA in the database. Continue?",
            abort=True,
        )
    asyncio.run(reset_database())
    console.print("[green]Database recreated.[/green]")


# -----------------------------------------------------------------------------
# category
# -----------------------------------------------------------------------------


@category_app.command("add")
def category_add(name: str = typer.Argument(..., help="Category name")) -> None:
    """Create a catalog category."""
    category = _run(_with_service(lambda s: s.add_category(name)))
    console.print(f"[green]Created category[/green] {category.name} (id={category.id})")


@category_app.command("list")
def category_list() -> None:
    """List all catalog categories."""
    categories = _run(_with_service(lambda s: s.get_all_categories()))

    table = Table(title="Categories")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    for category in categories:
        table.add_row(str(category.id), category.name)
    console.print(table)


# -----------------------------------------------------------------------------
# admin
# -----------------------------------------------------------------------------


@admin_app.command("create")
def admin_create(
    name: str = typer.Option(..., "--name", help="Display name"),
    email: str = typer.Option(..., "--email", help="Login email"),
    password: str = typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
) -> None:
    """Create an admin account (used to bootstrap the first admin)."""
    dto = PersonCreateDTO(name=name, email=email, password=password)
    admin = _run(_with_service(lambda s: s.add_admin(dto)))
    console.print(f"[green]Created admin[/green] {admin.email} (id={admin.id})")


# -----------------------------------------------------------------------------
# token
# -----------------------------------------------------------------------------


async def _find_admin(email: str):
    engine = create_engine_from_settings()
    try:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            return await AdminRepositorySQLAlchemy(session).find_by_email(email)
    finally:
        await engine.dispose()


@token_app.command("issue")
def token_issue(
    admin_email: str = typer.Argument(..., help="Email of an existing admin"),
) -> None:
    """Issue an API access token for an admin."""
    admin = asyncio.run(_find_admin(admin_email))
    if admin is None or admin.id is None:
        console.print(f"[red]Error:[/red] no admin with email {admin_email}")
        raise typer.Exit(code=1)

    settings = get_settings()
    jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )
    token = jwt_service.create_access_token(admin.id, admin.email, admin.role.name)
    # Plain output so the token can be piped
    typer.echo(token)


# -----------------------------------------------------------------------------
# secrets
# -----------------------------------------------------------------------------


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for MindStore configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]MindStore Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes for a strong HS256 key
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")

    console.print("=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
