"""CLI entry point for Scholia."""

import sys
import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import click
from click.core import ParameterSource
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn
from rich.table import Table
from rich.panel import Panel

from scholia import Scholia, ScholiaConfig, __version__
from scholia.config import OUTPUT_FORMATS
from scholia.exceptions import ScholiaError

console = Console()

# CLI parameter name -> ScholiaConfig field
CONFIG_FIELDS = {
    "file": "output_file",
    "name": "project_name",
    "version": "project_version",
    "desc": "project_description",
    "multi": "multi_file",
    "exclude": "exclude",
    "lift_inline_comments": "lift_inline_comments",
    "exclude_lifted_comments": "exclude_lifted_comments",
    "merge_adjacent_code": "merge_adjacent_code",
    "output_format": "output_format",
    "verbose": "verbose",
}


def setup_logging(verbose: bool) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_config(
    ctx: click.Context, config_path: Optional[str], params: Dict[str, Any]
) -> ScholiaConfig:
    """Build the configuration from an optional YAML file and CLI options.

    Options given on the command line win over the file; defaults do not.

    Args:
        ctx: Click context, used to tell explicit options from defaults
        config_path: Path to a YAML config file, if any
        params: CLI parameter values

    Returns:
        Validated configuration

    Raises:
        ScholiaConfigError: If the file or a value is invalid
    """
    overrides = {}
    for param, field_name in CONFIG_FIELDS.items():
        value = params[param]
        if field_name == "exclude":
            value = list(value)
        if config_path and ctx.get_parameter_source(param) is ParameterSource.DEFAULT:
            continue
        overrides[field_name] = value

    if config_path:
        return replace(ScholiaConfig.from_yaml(config_path), **overrides)
    return ScholiaConfig(**overrides)


@click.command()
@click.argument("sources", nargs=-1, type=click.Path())
@click.option(
    "-d",
    "--dir",
    default="./docs",
    help="Directory into which the documentation will be written",
    type=click.Path(),
)
@click.option(
    "-f",
    "--file",
    default="uberdoc.md",
    help="File into which all the documentation will be written",
)
@click.option("-n", "--name", default=None, help="Project name")
@click.option("-v", "--version", default=None, help="Project version")
@click.option("-D", "--desc", default=None, help="Project description")
@click.option(
    "-m",
    "--multi",
    is_flag=True,
    help="Generate each namespace documentation as a separate file",
)
@click.option(
    "-e",
    "--exclude",
    multiple=True,
    help="Regular expression; matching source files are skipped (repeatable)",
)
@click.option(
    "-L",
    "--lift-inline-comments/--no-lift-inline-comments",
    default=True,
    help="Lift ;; inline comments to the top of the enclosing form",
)
@click.option(
    "-X",
    "--exclude-lifted-comments/--no-exclude-lifted-comments",
    default=True,
    help="If lifting inline comments, also exclude them from the code",
)
@click.option(
    "--merge-adjacent-code",
    is_flag=True,
    help="Join code forms on consecutive lines into one section",
)
@click.option(
    "--format",
    "output_format",
    default="markdown",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration YAML file",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(__version__, "--version-info")
@click.pass_context
def cli(
    ctx: click.Context,
    sources: Tuple[str, ...],
    dir: str,
    file: str,
    name: Optional[str],
    version: Optional[str],
    desc: Optional[str],
    multi: bool,
    exclude: Tuple[str, ...],
    lift_inline_comments: bool,
    exclude_lifted_comments: bool,
    merge_adjacent_code: bool,
    output_format: str,
    config: Optional[str],
    verbose: bool,
) -> None:
    """Scholia: literate documentation for Clojure sources.

    Splits each source into documentation and code sections and writes
    them as Markdown or JSON.

    SOURCES: Clojure files (.clj, .cljs, .cljc, .cljx), in output order
    """
    if not sources:
        click.echo(ctx.get_usage())
        console.print("[red]Error:[/red] no source files given")
        sys.exit(1)

    try:
        scholia_config = build_config(ctx, config, ctx.params)
    except ScholiaError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    verbose = scholia_config.verbose
    setup_logging(verbose)

    # Display header
    console.print(
        Panel.fit(
            f"[bold blue]Scholia v{__version__}[/bold blue]\n"
            f"Literate documentation for Clojure",
            border_style="blue",
        )
    )
    console.print()

    scholia = Scholia(config=scholia_config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Documenting...", total=100)

        def on_progress(stage: str, pct: float) -> None:
            progress.update(task, completed=int(pct * 100), description=f"[cyan]{stage}")

        try:
            result = scholia.document(
                input_files=list(sources),
                output_dir=dir,
                progress_callback=on_progress,
            )
        except ScholiaError as e:
            console.print(f"\n[red]Processing error:[/red] {e}")
            sys.exit(1)
        except Exception as e:
            console.print(f"\n[red]Unexpected error:[/red] {e}")
            if verbose:
                console.print_exception()
            sys.exit(1)

    console.print()

    if result.success:
        console.print(
            f"[green]✓[/green] Documented {result.document_count} namespaces "
            f"in {result.section_count} sections"
        )
        for path in result.output_paths:
            console.print(f"[green]✓[/green] Output: {path}")

        if verbose and result.metrics:
            console.print()
            metrics_table = Table(title="Metrics", show_header=True)
            metrics_table.add_column("Metric", style="cyan")
            metrics_table.add_column("Value", style="green")

            for key, value in result.metrics.items():
                if isinstance(value, float):
                    metrics_table.add_row(key, f"{value:.3f}")
                else:
                    metrics_table.add_row(key, str(value))

            console.print(metrics_table)

        if result.warnings:
            console.print()
            for warning in result.warnings:
                console.print(f"[yellow]Warning:[/yellow] {warning}")

    else:
        console.print("[red]✗[/red] Documentation failed")
        for error in result.errors:
            console.print(f"  [red]•[/red] {error}")
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
