"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import ConfigurationError, Settings, load_settings
from ..db import ExerciseRepository, ExerciseStore, create_store_client

RULE_WIDTH = 50


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_settings(ctx: click.Context) -> Settings:
    """Load Supabase settings, exiting with status 1 if any are missing."""
    obj = ctx.find_object(dict) or {}
    try:
        return load_settings(obj.get("env_file"))
    except ConfigurationError as e:
        echo_error(str(e))
        click.echo(
            "Set VITE_SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY in your .env file."
        )
        ctx.exit(1)


async def open_store(settings: Settings) -> ExerciseStore:
    """Connect to Supabase and return the exercises repository."""
    client = await create_store_client(settings)
    return ExerciseRepository(client, table=settings.table)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def echo_rule() -> None:
    """Print a horizontal separator."""
    click.echo("=" * RULE_WIDTH)
