"""CLI entry point for exercise-catalog."""

from pathlib import Path

import click

from . import __version__
from .commands import activate, populate


@click.group()
@click.version_option(version=__version__, prog_name="exercise-catalog")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read Supabase settings from this file instead of .env",
)
@click.pass_context
def main(ctx: click.Context, env_file: Path | None):
    """exercise-catalog: maintain the app's exercise library in Supabase.

    Reads VITE_SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY from the
    environment (or a .env file).

    Example usage:

        # Load new exercises from src/data/exercises.json
        exercise-catalog populate

        # Activate the basic exercise set
        exercise-catalog activate
    """
    ctx.ensure_object(dict)
    ctx.obj["env_file"] = env_file


# Register commands
main.add_command(populate)
main.add_command(activate)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
