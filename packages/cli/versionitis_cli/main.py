"""Versionitis CLI - Main entry point."""
from typing import Optional

import typer

from versionitis_common import configure_logging, normalize_log_level

from . import info_cmd, manifest_cmd, range_cmd, repo_cmd
from .utils import handle_error

app = typer.Typer(
    name="versionitis",
    help="Versionitis CLI - Version ranges, package repos and manifests",
    no_args_is_help=True,
    add_completion=False
)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level", "-l",
        help="debug, info, warning or error (default: $VERSIONITIS_LOG_LEVEL or info)"
    ),
    log_json: bool = typer.Option(False, "--log-json", help="Log JSON lines to stderr"),
):
    try:
        level = normalize_log_level(log_level) if log_level is not None else None
        configure_logging(level=level, json_format=log_json or None)
    except Exception as e:
        # Also covers a bad VERSIONITIS_LOG_LEVEL, rejected when settings load.
        handle_error(e)
        raise typer.Exit(1)


# Register command groups
app.add_typer(range_cmd.app, name="range")
app.add_typer(repo_cmd.app, name="repo")
app.add_typer(manifest_cmd.app, name="manifest")
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
