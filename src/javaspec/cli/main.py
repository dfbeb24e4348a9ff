"""Command-line interface for javaspec."""

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from ..exceptions import JavaSpecError
from ..specification_version import KNOWN_VERSIONS, JavaSpecificationVersion
from ._helpers import console, print_error, print_success

app = typer.Typer(help="Parse and compare Java specification versions (JEP-223)")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Parse and compare Java specification versions (JEP-223)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def _current_version() -> JavaSpecificationVersion:
    try:
        return JavaSpecificationVersion.for_current_platform()
    except ValidationError as e:
        print_error(f"Invalid probe settings: {e}")
        raise typer.Exit(1) from e
    except JavaSpecError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def normalize(
    versions: Annotated[
        list[str], typer.Argument(..., help="Version strings to normalize")
    ],
) -> None:
    """Normalize one or more Java specification versions."""
    table = Table(title="Java Specification Versions")
    table.add_column("Input", style="cyan")
    table.add_column("Normalized", style="green")

    failed = False
    for raw in versions:
        try:
            table.add_row(escape(raw), str(JavaSpecificationVersion.parse(raw)))
        except JavaSpecError as e:
            table.add_row(escape(raw), "[red]invalid[/red]")
            print_error(str(e))
            failed = True

    console.print(table)
    if failed:
        raise typer.Exit(1)


@app.command()
def compare(
    left: Annotated[str, typer.Argument(..., help="First version")],
    right: Annotated[str, typer.Argument(..., help="Second version")],
) -> None:
    """Compare two Java specification versions."""
    try:
        left_ver = JavaSpecificationVersion.parse(left)
        right_ver = JavaSpecificationVersion.parse(right)
    except JavaSpecError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if left_ver < right_ver:
        operator = "<"
    elif left_ver > right_ver:
        operator = ">"
    else:
        operator = "="
    console.print(f"{left_ver} {operator} {right_ver}")


@app.command()
def current() -> None:
    """Show the Java specification version of the current platform."""
    console.print(str(_current_version()))


@app.command()
def check(
    minimum: Annotated[
        str,
        typer.Option(..., "--minimum", "-m", help="Minimum required version"),
    ],
) -> None:
    """Check that the current platform meets a minimum version."""
    try:
        required = JavaSpecificationVersion.parse(minimum)
    except JavaSpecError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    found = _current_version()
    if found < required:
        print_error(f"Java {found} found, {required} or newer is required")
        raise typer.Exit(1)

    print_success(f"Java {found} satisfies {required} or newer")


@app.command()
def known() -> None:
    """List the well-known Java specification versions."""
    table = Table(title="Known Versions")
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="green")

    for version in KNOWN_VERSIONS:
        table.add_row(f"JAVA_{version.major}", str(version))

    console.print(table)


if __name__ == "__main__":
    app()
