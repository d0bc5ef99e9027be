"""Command-line interface for python-docx-parastyle.

Provides commands for turning paragraph style maps into WordprocessingML
paragraph properties from the terminal.
"""

from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .errors import DocxStyleError
from .format_builder import to_xml
from .models.tabs import Tabs
from .style_map import load_paragraph_style

app = typer.Typer(
    name="docx-parastyle",
    help="Render paragraph style maps as WordprocessingML paragraph properties.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docx-parastyle version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render paragraph style maps as WordprocessingML paragraph properties."""
    pass


@app.command()
def render(
    file: Annotated[Path, typer.Argument(help="Path to the YAML/JSON style map")],
    format: Annotated[
        str | None, typer.Option("--format", "-f", help="File format: yaml or json")
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Render a style map as a <w:pPr> element."""
    try:
        style = load_paragraph_style(file, format)
        xml = to_xml(style)
    except (DocxStyleError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if output is None:
        typer.echo(xml, nl=False)
        return

    output.write_text(xml, encoding="utf-8")
    typer.echo(f"Wrote paragraph properties to {output}")


@app.command()
def show(
    file: Annotated[Path, typer.Argument(help="Path to the YAML/JSON style map")],
    format: Annotated[
        str | None, typer.Option("--format", "-f", help="File format: yaml or json")
    ] = None,
) -> None:
    """Show the paragraph style values a style map produces."""
    try:
        style = load_paragraph_style(file, format)
    except (DocxStyleError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for name, value in style.to_dict().items():
        if isinstance(value, Tabs):
            value = ", ".join(
                f"{stop.stop_type or 'left'}@{stop.position}" for stop in value
            )
        typer.echo(f"{name}: {value}")


if __name__ == "__main__":
    app()
