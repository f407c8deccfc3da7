"""Populate the exercises table command."""

from pathlib import Path

import click

from ..data.exercise_loader import ExerciseFileError, get_exercises_json_path, load_exercises
from ..db import ExerciseStore, StoreError
from ..models.exercises import GIF_DIRECTORY
from ..services.populate import (
    DEFAULT_BATCH_DELAY,
    DEFAULT_BATCH_SIZE,
    PopulateSummary,
    filter_new_rows,
    insert_in_batches,
    to_row,
)
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_rule,
    echo_success,
    echo_warning,
    get_settings,
    open_store,
)


async def run_populate(
    store: ExerciseStore,
    path: Path,
    batch_size: int = DEFAULT_BATCH_SIZE,
    delay: float = DEFAULT_BATCH_DELAY,
) -> PopulateSummary | None:
    """Load the catalog file into the store.

    Returns the run summary, or None if the store could not be reached.

    Raises:
        ExerciseFileError: If the catalog file cannot be read or parsed
    """
    echo_info("Testing connection to Supabase...")
    try:
        await store.ping()
    except StoreError as e:
        echo_error(f"Cannot connect to Supabase: {e.cause}")
        return None
    echo_success("Connection to Supabase OK")

    echo_info("Checking existing exercises in the database...")
    try:
        existing_ids = await store.list_identifiers()
    except StoreError as e:
        echo_warning(f"Could not check existing exercises ({e.cause}); assuming none")
        existing_ids = set()
    echo_info(f"Found {len(existing_ids)} existing exercises")

    exercises = load_exercises(path)
    echo_info(f"Read {len(exercises)} exercises from {path}")

    rows = [to_row(exercise) for exercise in exercises]
    new_rows = filter_new_rows(rows, existing_ids)

    summary = PopulateSummary(total=len(rows), skipped=len(rows) - len(new_rows))
    echo_info(f"{len(new_rows)} new exercises to insert")
    echo_info(f"{summary.skipped} exercises skipped (already exist)")

    if not new_rows:
        echo_success("All exercises are already in the database!")
        return summary

    echo_info(f"Inserting {len(new_rows)} exercises in batches of {batch_size}")
    async for result in insert_in_batches(store, new_rows, batch_size, delay):
        summary.add(result)
        if result.ok:
            echo_success(f"Batch {result.number} done: {result.size} exercises")
        else:
            echo_error(f"Batch {result.number} failed: {result.error}")

    return summary


def print_summary(summary: PopulateSummary) -> None:
    """Print the end-of-run report."""
    click.echo()
    echo_rule()
    click.echo("SUMMARY:")
    click.echo(f"  {summary.inserted} exercises inserted")
    click.echo(f"  {summary.failed} exercises failed")
    click.echo("  All exercises are set to is_active = false")
    click.echo(f"  GIF paths: {GIF_DIRECTORY}/{{exerciseId}}.gif")
    echo_rule()

    if summary.inserted > 0:
        click.echo()
        click.echo("Next steps:")
        click.echo("  1. Open your Supabase dashboard")
        click.echo("  2. Find the exercises table")
        click.echo("  3. Set is_active = true for the exercises you want to show")
        click.echo("     (or run: exercise-catalog activate)")
        click.echo("  4. Test your app - it only shows active exercises")


@click.command()
@click.option(
    "--file",
    "-f",
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Exercise catalog JSON (default: src/data/exercises.json)",
)
@click.option(
    "--batch-size",
    "-b",
    type=click.IntRange(min=1),
    default=DEFAULT_BATCH_SIZE,
    show_default=True,
    help="Number of exercises per insert call",
)
@click.pass_context
@async_command
async def populate(ctx: click.Context, path: Path | None, batch_size: int):
    """Load exercises from a JSON file into the exercises table.

    Exercises whose ID already exists are skipped. New exercises are
    inserted as inactive, with their GIF path derived from the ID.

    Example:
        exercise-catalog populate --file src/data/exercises.json
    """
    settings = get_settings(ctx)
    if path is None:
        path = get_exercises_json_path()

    click.echo("Populating exercises database...")
    click.echo()
    try:
        store = await open_store(settings)
        summary = await run_populate(store, path, batch_size=batch_size)
    except ExerciseFileError as e:
        echo_error(f"Failed to read exercise file: {e}")
        ctx.exit(1)
    except Exception as e:
        echo_error(f"Critical error: {e}")
        ctx.exit(1)

    if summary is not None and summary.batches > 0:
        print_summary(summary)
