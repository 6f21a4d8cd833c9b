"""Repo commands - Record and list package releases."""
from typing import Optional

import typer
from rich.table import Table

from .session import RepoSession
from .utils import console, success, info, warning, handle_error

app = typer.Typer(help="Record and list package releases", no_args_is_help=True)

REPO_OPTION_HELP = "Repo file (default: $VERSIONITIS_REPO_FILE or repo.yaml)"


@app.command(name="add")
def add(
    name: str = typer.Argument(..., help="Package name, e.g. foo"),
    version: str = typer.Argument(..., help="Version, e.g. 0.1.0"),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help=REPO_OPTION_HELP),
    unchecked: bool = typer.Option(
        False,
        "--unchecked", "-u",
        help="Skip the ordering check; run 'repo sort' afterwards"
    ),
):
    """
    Record a new release of a package.

    Without --unchecked the version must be greater than the latest one
    already recorded.

    Examples:
        versionitis repo add foo 0.1.0
        versionitis repo add foo 0.0.9 --unchecked
    """
    try:
        session = RepoSession.open(repo)
        if unchecked:
            package = session.repo.add_version_unchecked(name, version)
        else:
            package = session.repo.add_version(name, version)
        session.save()

        success(f"Added {package.spec} to {session.path}")
        if not session.repo.is_clean():
            warning("Repo has unchecked entries; run 'versionitis repo sort'")

    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command(name="show")
def show(
    name: Optional[str] = typer.Argument(None, help="Only show this package"),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help=REPO_OPTION_HELP),
):
    """
    List recorded releases.

    Examples:
        versionitis repo show
        versionitis repo show foo
    """
    try:
        session = RepoSession.open(repo)
        if not session.existed:
            info(f"No repo at {session.path}")
            return

        if name is not None:
            table = Table(title=name, show_header=True, header_style="bold cyan")
            table.add_column("Version", style="green")
            for version in session.repo.versions(name):
                table.add_row(str(version))
        else:
            table = Table(title=str(session.path), show_header=True, header_style="bold cyan")
            table.add_column("Package", style="cyan", no_wrap=True)
            table.add_column("Versions", style="green")
            table.add_column("Latest")
            for package_name in session.repo.package_names():
                versions = session.repo.versions(package_name)
                table.add_row(
                    package_name,
                    ", ".join(str(v) for v in versions),
                    str(versions[-1]),
                )
        console.print(table)

        if not session.repo.is_clean():
            warning("Repo has unchecked entries; run 'versionitis repo sort'")

    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command(name="sort")
def sort(
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help=REPO_OPTION_HELP),
):
    """
    Sort every release history and drop duplicates.

    Examples:
        versionitis repo sort
    """
    try:
        session = RepoSession.open(repo)
        if not session.existed:
            info(f"No repo at {session.path}")
            return
        if session.repo.is_clean():
            info("Repo is already sorted")
            return

        session.repo.dedup_sort()
        session.save()
        success(f"Sorted {len(session.repo)} package(s) in {session.path}")

    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)
