"""Range commands - Parse and evaluate version ranges."""
import typer
from rich.table import Table

from versionitis_core import (
    parse_package_interval,
    parse_version_interval,
    parse_version_number,
)

from .utils import console, success, warning, handle_error

app = typer.Typer(help="Parse and evaluate version ranges", no_args_is_help=True)


@app.command(name="parse")
def parse(
    text: str = typer.Argument(..., help="Range such as '1.2.3<2.0.0'"),
    package: bool = typer.Option(
        False,
        "--package", "-p",
        help="Parse a package range such as 'foo=1.2.3<2.0.0'"
    ),
):
    """
    Parse a range and print its variant and canonical form.

    Examples:
        versionitis range parse "1.2.3 <= 2.0.0"
        versionitis range parse --package "foo: '1.0<2.0'"
    """
    try:
        interval = parse_package_interval(text) if package else parse_version_interval(text)

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Variant", style="cyan")
        table.add_column("Canonical", style="green")
        table.add_column("Bounds")
        table.add_row(
            type(interval).__name__,
            interval.to_range(),
            ", ".join(str(bound) for bound in interval.bounds()),
        )
        console.print(table)

    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command(name="check")
def check(
    text: str = typer.Argument(..., help="Version range"),
    version: str = typer.Argument(..., help="Version to test, e.g. 1.5.0"),
):
    """
    Report whether a version lies inside a range.

    Examples:
        versionitis range check "1.2.3<2.0.0" 1.5.0
    """
    try:
        interval = parse_version_interval(text)
        number = parse_version_number(version)
    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)

    if number in interval:
        success(f"{number} is in {interval}")
    else:
        warning(f"{number} is not in {interval}")
