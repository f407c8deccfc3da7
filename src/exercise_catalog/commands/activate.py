"""Activate basic exercises command."""

import click

from ..db import ExerciseStore, StoreError
from ..models.exercises import basic_exercise_names
from ..services.activate import ActivationStatus, ActivationSummary, activate_one
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    get_settings,
    open_store,
)


async def run_activation(store: ExerciseStore, names: list[str]) -> ActivationSummary:
    """Activate the first inactive match for each name and report progress."""
    summary = ActivationSummary()

    for name in names:
        echo_info(f'Searching for: "{name}"')
        result = await activate_one(store, name)
        summary.add(result)

        if result.status == ActivationStatus.ACTIVATED:
            echo_success(
                f"Activated: {result.exercise.name} ({result.exercise.exercise_id})"
            )
        elif result.status == ActivationStatus.NOT_FOUND:
            echo_warning(f'No exercises found for: "{result.name}"')
        elif result.status == ActivationStatus.SEARCH_FAILED:
            echo_error(f"Search for {result.name} failed: {result.error}")
        else:
            echo_error(f"Failed to activate {result.exercise.name}: {result.error}")

    return summary


async def report_active_count(store: ExerciseStore) -> int:
    """Print how many exercises are active in total."""
    try:
        count = await store.count_active()
    except StoreError as e:
        echo_warning(f"Could not count active exercises ({e.cause})")
        count = 0

    click.echo()
    echo_success(f"Done! {count} exercises are now active")
    return count


@click.command()
@click.pass_context
@async_command
async def activate(ctx: click.Context):
    """Activate the basic exercise set.

    For each name in the basic list (push up, bench press, squat, ...),
    the first inactive exercise whose name contains it is activated.
    Names with no inactive match are skipped.
    """
    settings = get_settings(ctx)

    click.echo("Activating basic exercises...")
    click.echo()
    try:
        store = await open_store(settings)
        summary = await run_activation(store, basic_exercise_names())
        await report_active_count(store)
    except Exception as e:
        echo_error(f"Critical error: {e}")
        ctx.exit(1)

    click.echo(
        f"{len(summary.activated)} activated, {len(summary.not_found)} not found, "
        f"{len(summary.failed)} failed"
    )
    click.echo("You can now test your app with the basic exercises!")
