"""Typer application and main entry point for the CLI.

Commands:
    diffy-setup project-create   Push Diffy credentials to CircleCI
    diffy-setup --config         Show the resolved configuration
    diffy-setup --version        Show version information
"""

from typing import Annotated

import typer

from diffy_setup.config.manager import ConfigManager
from diffy_setup.utils.console import print_error, print_info, show_version
from diffy_setup.utils.errors import DiffySetupError, ExitCode, UserCancelledError
from diffy_setup.utils.logging import setup_logging
from diffy_setup.workflow.runner import run_project_create

app = typer.Typer(
    name="diffy-setup",
    help="Set up Diffy visual regression credentials for a site's CircleCI project",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    show_config: Annotated[
        bool,
        typer.Option(
            "--config",
            help="Show current configuration and exit",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """DIFFY-SETUP - Diffy credentials for CircleCI projects."""
    setup_logging()

    if show_config:
        config = ConfigManager()
        config.load()
        config.show()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("project-create")
def project_create() -> None:
    """Populate DIFFY environment variables in the site's CircleCI project.

    Asks for a Diffy API key and project, validates both against Diffy,
    caches them locally and sets DIFFY_API_KEY and DIFFY_PROJECT_ID on
    the CircleCI project of the cached site.
    """
    try:
        config = ConfigManager()
        settings = config.load()
        run_project_create(settings)

    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except DiffySetupError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


__all__ = ["app", "main", "project_create"]
