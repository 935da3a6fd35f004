"""Main CLI application."""

from __future__ import annotations

import logging

import typer
from typing_extensions import Annotated

from ..configuration import load_configuration_file, validate_configuration
from ..core.context import TaskResult
from ..host.console import ConsoleDialogs
from ..host.loader import HostLoadError, load_host
from ..host.local import LocalFileSystem
from ..runner import run_autodazzler
from ..settings import get_settings
from .parsers import CONFIG_PATH_KEY, parse_script_args

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="autodazzler",
    help="Batch renderer driven by a scene/render configuration file.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def render(
    script_args: Annotated[
        list[str] | None,
        typer.Argument(
            help=f"Host script arguments, e.g. {CONFIG_PATH_KEY}=path/to/config.json.",
            metavar="KEY=VALUE",
            show_default=False,
        ),
    ] = None,
    host_spec: Annotated[
        str | None,
        typer.Option(
            "--host",
            help="Host factory returning an autodazzler Host (default: $AUTODAZZLER_HOST).",
            metavar="MODULE:ATTR",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Check every configured scene, then render them all."""
    _configure_logging(verbose)
    settings = get_settings()

    # Malformed arguments abort before anything is loaded.
    arguments = parse_script_args(script_args or [])
    configuration_path = arguments.get(CONFIG_PATH_KEY) if arguments else None
    interactive = configuration_path is None

    spec = host_spec or settings.host
    if not spec:
        raise typer.BadParameter(
            "No host configured, pass --host or set AUTODAZZLER_HOST.",
            param_hint="--host",
        )
    try:
        host = load_host(spec)
    except HostLoadError as exc:
        raise typer.BadParameter(str(exc), param_hint="--host") from exc

    logger.debug(f"Starting autodazzler with host {spec}")
    result = run_autodazzler(
        host,
        settings,
        configuration_path=configuration_path,
        interactive=interactive,
    )

    outcome = result.name if result is not None else "NOT_RUN"
    logger.debug(f"Completed: {outcome}")
    if result is not TaskResult.COMPLETED:
        raise typer.Exit(code=1)


@app.command()
def validate(
    config_path: Annotated[
        str,
        typer.Argument(help="Configuration file to check.", metavar="CONFIG"),
    ],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Validate a configuration against the local filesystem, without rendering."""
    _configure_logging(verbose)

    files = LocalFileSystem()
    dialogs = ConsoleDialogs(acknowledge=False)

    raw_configuration = load_configuration_file(config_path, files, dialogs)
    if raw_configuration is None:
        raise typer.Exit(code=1)

    configuration = validate_configuration(raw_configuration, files, dialogs)
    if configuration is None:
        raise typer.Exit(code=1)

    renders = sum(len(scene.render_configurations) for scene in configuration.scenes)
    typer.echo(
        f"{config_path}: {len(configuration.scenes)} scene(s), {renders} render(s), valid."
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
