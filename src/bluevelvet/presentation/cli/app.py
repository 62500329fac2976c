"""Blue Velvet CLI application using Typer.

Operational commands for the backend: running the API server, generating
secrets, managing the database and exporting the category catalog.
"""

import asyncio
import secrets
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import async_sessionmaker

from bluevelvet.application.commands.catalog import INITIAL_CATEGORIES
from bluevelvet.application.queries.catalog import ExportCategoriesQuery
from bluevelvet.infrastructure.export import (
    CategoryCsvExporter,
    CategoryExcelExporter,
)
from bluevelvet.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    create_tables,
    display_url,
    drop_tables,
    seed_categories,
)
from bluevelvet.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from bluevelvet_config.settings import get_settings

app = typer.Typer(
    name="bluevelvet",
    help="Blue Velvet Music Store backend CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
db_app = typer.Typer(
    name="db",
    help="Database schema and seed data",
    no_args_is_help=True,
)
categories_app = typer.Typer(
    name="categories",
    help="Category catalog utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(categories_app)


class ExportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"


@app.command("serve")
def serve(
    host: Annotated[Optional[str], typer.Option(help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port")] = None,
    reload: Annotated[bool, typer.Option(help="Reload on code changes")] = False,
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "bluevelvet.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate the JWT signing secret.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Blue Velvet Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes is comfortably above the HS256 key size
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the value to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def db_init() -> None:
    """Create missing tables. Existing data is left untouched."""
    console.print(f"Database: [cyan]{display_url(get_settings().database_url)}[/cyan]")
    asyncio.run(create_tables())
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("reset")
def db_reset(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Drop and recreate all tables. ALL DATA IS LOST."""
    if not force:
        typer.confirm("This deletes all users and categories. Continue?", abort=True)

    async def _reset() -> None:
        engine = create_engine()
        try:
            await drop_tables(engine)
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_reset())
    console.print("[green]Database reset.[/green]")


@db_app.command("seed")
def db_seed() -> None:
    """Load the initial music store categories into an empty catalog."""

    async def _seed() -> int:
        engine = create_engine()
        try:
            await create_tables(engine)
            return await seed_categories(engine)
        finally:
            await engine.dispose()

    inserted = asyncio.run(_seed())
    if inserted == 0:
        console.print("[yellow]Catalog is not empty, nothing seeded.[/yellow]")
        return

    table = Table(title=f"Seeded {inserted} categories")
    table.add_column("Name", style="cyan")
    table.add_column("Image")
    for name, image in INITIAL_CATEGORIES:
        table.add_row(name, image)
    console.print(table)


@categories_app.command("export")
def export_categories(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Target file (default: timestamped)"),
    ] = None,
    fmt: Annotated[
        ExportFormat,
        typer.Option("--format", help="File format"),
    ] = ExportFormat.CSV,
) -> None:
    """Write every category to a CSV or Excel file."""

    async def _load():
        engine = create_engine()
        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        try:
            async with session_maker() as session:
                factory = SQLAlchemyRepositoryFactory(session)
                return await ExportCategoriesQuery.from_factory(factory).execute()
        finally:
            await engine.dispose()

    categories = asyncio.run(_load())

    if fmt is ExportFormat.XLSX:
        exporter = CategoryExcelExporter()
        target = output or Path(exporter.filename())
        target.write_bytes(exporter.generate(categories))
    else:
        exporter = CategoryCsvExporter()
        target = output or Path(exporter.filename())
        target.write_text(exporter.generate(categories), encoding="utf-8")

    console.print(f"[green]Exported {len(categories)} categories to {target}[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
