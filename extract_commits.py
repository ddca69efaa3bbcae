#!/usr/bin/env python3
"""
CommitMoji Commit Extractor CLI

Reads the commit history of the Git repository in the current directory and
writes every commit message, most recent first, to
``public/commitMessages.json`` for the chart renderer.

Usage:
    python extract_commits.py [OPTIONS]

Examples:
    python extract_commits.py                            # Extract from current repo
    python extract_commits.py --repo-path /path/to/repo  # Extract from another repo
    python extract_commits.py --output out/messages.json # Write elsewhere
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import List

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text

from config.settings import configure_logging, settings
from services.commit_classifier.classifier import ClassificationSummary, summarize_messages
from services.commit_extractor.main import commit_extractor_service
from shared.exceptions import CommitChartError
from shared.models import CommitCategory

configure_logging()
logger = logging.getLogger(__name__)


class CommitExtractorCLI:
    """CLI interface for commit message extraction."""

    def __init__(self):
        self.console = Console()

    def display_success_message(self, messages: List[str], output_file: Path):
        success_text = Text()
        success_text.append("✅ ", style="bold green")
        success_text.append("Commit messages extracted!\n\n", style="bold white")
        success_text.append("Messages: ", style="cyan")
        success_text.append(f"{len(messages)}\n", style="bold white")
        success_text.append("Written to: ", style="cyan")
        success_text.append(str(output_file), style="white")

        self.console.print(Panel(success_text, title="Success", border_style="green"))

    def display_summary(self, summary: ClassificationSummary):
        """Display per-category counts of the extracted messages."""
        table = Table(title="Commit Categories", show_header=True, header_style="bold magenta")
        table.add_column("Category", style="cyan", no_wrap=True)
        table.add_column("Glyph")
        table.add_column("Commits", style="green", justify="right")

        for category in CommitCategory:
            table.add_row(category.label, category.glyph, str(summary.counts[category.label]))
        table.add_row("[dim]unclassified[/dim]", "", f"[dim]{summary.unclassified}[/dim]")

        self.console.print(table)

    def display_error_message(self, error: str, suggestion: str = ""):
        """Display error message with helpful suggestions."""
        error_text = Text()
        error_text.append("❌ ", style="bold red")
        error_text.append("Error occurred\n\n", style="bold white")
        error_text.append("Error: ", style="red")
        error_text.append(f"{error}\n", style="white")

        if suggestion:
            error_text.append("Suggestion: ", style="yellow")
            error_text.append(suggestion, style="white")

        self.console.print(Panel(error_text, title="Error", border_style="red"))


# CLI instance
cli = CommitExtractorCLI()


@click.command()
@click.option(
    '--repo-path',
    default=settings.extractor.repo_path,
    help='Path to Git repository (default: current directory)',
    type=click.Path(file_okay=False, dir_okay=True)
)
@click.option(
    '--output',
    default=settings.extractor.output_file,
    help='Where to write the commit messages document',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output'
)
def extract_commits(repo_path: str, output: str, verbose: bool):
    """Extract commit messages from a Git repository."""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    output_file = Path(output)

    async def main():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=cli.console,
            transient=True
        ) as progress:
            task = progress.add_task("Reading commit history...", total=None)
            messages = await commit_extractor_service.extract(repo_path, output_file)
            progress.update(task, description="Commit history read")
        return messages

    try:
        messages = asyncio.run(main())
    except CommitChartError as e:
        cli.display_error_message(e.message, e.suggestion)
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error writing commit messages: {e}")
        cli.display_error_message(
            f"Could not write {output_file}: {e}",
            "Check that the output directory is writable"
        )
        sys.exit(1)

    cli.display_success_message(messages, output_file)
    cli.display_summary(summarize_messages(messages))


if __name__ == "__main__":
    extract_commits()
