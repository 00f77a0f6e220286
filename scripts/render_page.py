#!/usr/bin/env python3
"""
Comparison Page CLI

Renders side-by-side comparison content to HTML and checks content files.

Commands:
    render   - Render a content file to a standalone HTML page
    validate - Load a content file and report validation errors
    list     - Print the entry titles of a content file in page order

Examples:\n

    render_page.py render                                  # Render bundled content

    render_page.py render my_comparisons.yaml -o page.html # Render a custom file

    render_page.py render --style monokai                  # Pick a Pygments style

    render_page.py validate my_comparisons.yaml            # Check a file before rendering
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from sidebyside.contexts.content import InvalidContentEntry, InvalidContentFile, load_content
from sidebyside.contexts.rendering import render_comparison_page

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Render side-by-side framework comparisons to HTML",
    add_completion=False,
    invoke_without_command=True,
)


ContentArgument = Annotated[
    Optional[Path],
    typer.Argument(
        help="YAML content file (defaults to SIDEBYSIDE_CONTENT_PATH or the bundled comparisons)",
        dir_okay=False,
    ),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    content: ContentArgument = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="HTML file to write (defaults to RESULTS_PATH/<content name>.html)",
            dir_okay=False,
        ),
    ] = None,
    style: Annotated[
        Optional[str],
        typer.Option(
            "--style",
            "-s",
            help="Pygments style for code blocks (defaults to PYGMENTS_STYLE)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug messages (per-entry composition, guessed lexers)",
        ),
    ] = False,
):
    """
    Render a content file to a standalone HTML page.

    Examples:\n

        $ render_page.py render                          # Bundled comparisons

        $ render_page.py render ui.yaml -o out/ui.html   # Custom content and output
    """
    result = render_comparison_page(
        content_path=content, output_path=output, style=style, verbose=verbose
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Entries: {result.entry_count}")
        if result.degraded_titles:
            typer.secho(
                f"  {len(result.degraded_titles)} entries fell back to plain text:",
                fg=typer.colors.YELLOW,
            )
            for title in result.degraded_titles:
                typer.echo(f"    - {title}")
        typer.echo(f"  Page: {display_path(result.output_path)}")
    else:
        typer.secho("✗ Render failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"{result.error}", fg=typer.colors.RED, err=True)

    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'render.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("validate")
def validate_command(content: ContentArgument = None):
    """
    Load a content file and report whether it is valid.

    Examples:\n

        $ render_page.py validate ui.yaml
    """
    try:
        model = load_content(content)
    except (InvalidContentEntry, InvalidContentFile) as e:
        typer.secho("✗ Invalid content", fg=typer.colors.RED, bold=True)
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Content is valid", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Title: {model.title}")
    typer.echo(f"  Columns: {' | '.join(fw.label for fw in model.frameworks)}")
    typer.echo(f"  Entries: {len(model)}")


@app.command("list")
def list_command(content: ContentArgument = None):
    """Print the entry titles of a content file in page order."""
    try:
        model = load_content(content)
    except (InvalidContentEntry, InvalidContentFile) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for i, title in enumerate(model.titles, 1):
        typer.echo(f"{i:>3}. {title}")


if __name__ == "__main__":
    app()
