#!/usr/bin/env python3
"""
CommitMoji Chart Renderer CLI

Loads the commit messages document (local file or URL), classifies the
messages and renders the per-category bar chart with its glyph overlay.

Usage:
    python render_chart.py [OPTIONS]

Examples:
    python render_chart.py                                            # Default document and output
    python render_chart.py --source http://localhost:8010/commitMessages.json
    python render_chart.py --output reports/chart.png
"""

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config.settings import configure_logging, settings
from services.commit_chart.renderer import CommitChartRenderer, register_chart_components
from shared.models import ChartDataset, glyph_for_label

configure_logging()
logger = logging.getLogger(__name__)


class CommitChartCLI:
    """CLI interface for chart rendering."""

    def __init__(self):
        self.console = Console()

    def display_counts(self, dataset: ChartDataset):
        table = Table(title=settings.chart.title, show_header=True, header_style="bold magenta")
        table.add_column("Category", style="cyan", no_wrap=True)
        table.add_column("Commits", style="green", justify="right")
        table.add_column("Bar")

        for label, value in zip(dataset.labels, dataset.data):
            table.add_row(label, str(value), glyph_for_label(label) * min(value, 20))

        self.console.print(table)

    def display_empty_chart(self, source: str):
        self.console.print(
            Panel(
                f"No commit messages could be loaded from [yellow]{source}[/yellow].\n"
                "An empty chart was rendered. Run [blue]python extract_commits.py[/blue] first.",
                title="Empty Chart",
                border_style="yellow",
            )
        )


# CLI instance
cli = CommitChartCLI()


@click.command()
@click.option(
    '--source',
    default=settings.chart.source,
    help='Commit messages document (path or http(s) URL)'
)
@click.option(
    '--output',
    default=settings.chart.output_file,
    help='Where to write the rendered PNG chart',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output'
)
def render_chart(source: str, output: str, verbose: bool):
    """Render the commit category chart."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    register_chart_components(settings.chart.font_family)
    renderer = CommitChartRenderer()

    dataset = asyncio.run(renderer.load_dataset(source))
    try:
        path = renderer.save(dataset, Path(output))
    except OSError as e:
        logger.error(f"Error writing commit chart: {e}")
        cli.console.print(f"[red]❌ Could not write {output}: {e}[/red]")
        sys.exit(1)

    if dataset.is_empty:
        cli.display_empty_chart(source)
    else:
        cli.display_counts(dataset)
    cli.console.print(f"\n[green]✅ Chart written to {path}[/green]")


if __name__ == "__main__":
    render_chart()
