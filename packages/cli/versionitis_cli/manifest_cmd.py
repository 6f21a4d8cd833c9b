"""Manifest commands - Create and query dependency manifests."""
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from versionitis_common import get_settings
from versionitis_core import (
    Manifest,
    load_manifest,
    parse_package,
    parse_version_interval,
    save_manifest,
)

from .utils import console, success, error, info, warning, handle_error, confirm_action

app = typer.Typer(help="Create and query dependency manifests", no_args_is_help=True)


@app.command(name="init")
def init(
    name: str = typer.Argument(..., help="Manifest name, e.g. fred-1.0.0"),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output file (default: <manifest dir>/<name>.yaml)"
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Overwrite existing file without asking"
    ),
):
    """
    Create an empty manifest.

    Examples:
        versionitis manifest init fred-1.0.0
        versionitis manifest init fred-1.0.0 -o fred.yaml --force
    """
    try:
        if not name.strip():
            error("Manifest name cannot be empty")
            raise typer.Exit(1)

        output_path = Path(output) if output else Path(get_settings().manifest_dir) / f"{name}.yaml"
        if output_path.exists() and not force:
            if not confirm_action(f"{output_path} already exists. Overwrite?", default=False):
                warning("Cancelled")
                raise typer.Exit(0)

        save_manifest(Manifest(name), output_path)
        success(f"Created {output_path}")

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command(name="add-dep")
def add_dep(
    path: str = typer.Argument(..., help="Manifest file"),
    name: str = typer.Argument(..., help="Dependency package name"),
    range_text: str = typer.Argument(..., metavar="RANGE", help="Version range, e.g. '0.1.0<1.0.0'"),
):
    """
    Constrain a dependency of a manifest.

    Each dependency can be constrained only once. The name is used as
    given, so scoped or dotted names work too.

    Examples:
        versionitis manifest add-dep fred.yaml foo "0.1.0<1.0.0"
    """
    try:
        manifest = load_manifest(path)
        manifest.add_dependency(name, parse_version_interval(range_text))
        save_manifest(manifest, path)
        success(f"{manifest.name} now depends on {manifest.get_dependency(name)} of {name}")

    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command(name="check")
def check(
    path: str = typer.Argument(..., help="Manifest file"),
    package: str = typer.Argument(..., help="Package, e.g. foo-1.5.0"),
):
    """
    Report whether a package satisfies a manifest's constraint on it.

    Examples:
        versionitis manifest check fred.yaml foo-1.5.0
    """
    try:
        manifest = load_manifest(path)
        candidate = parse_package(package)
    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)

    if not manifest.depends_on(candidate.name):
        info(f"{manifest.name} has no constraint on {candidate.name}")
    elif manifest.depends_on_package(candidate):
        success(f"{candidate} satisfies {manifest.get_dependency(candidate.name)}")
    else:
        warning(f"{candidate} does not satisfy {manifest.get_dependency(candidate.name)}")


@app.command(name="show")
def show(
    path: str = typer.Argument(..., help="Manifest file"),
):
    """
    List a manifest's dependencies.

    Examples:
        versionitis manifest show fred.yaml
    """
    try:
        manifest = load_manifest(path)
    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)

    if not len(manifest):
        info(f"{manifest.name} has no dependencies")
        return

    table = Table(title=manifest.name, show_header=True, header_style="bold cyan")
    table.add_column("Dependency", style="cyan", no_wrap=True)
    table.add_column("Range", style="green")
    for dependency, interval in manifest.dependencies.items():
        table.add_row(dependency, interval.to_range())
    console.print(table)
