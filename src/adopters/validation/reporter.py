"""
Console reporter for loaded adopter datasets.

Formats load results using Rich for clear, colored output.
"""

from collections import Counter

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adopters.errors import AdoptersError, DuplicateError, SchemaError
from adopters.schemas.models import AdoptersContent, Category


class ConsoleReporter:
    """Formats and displays a loaded dataset or a load failure."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_content(self, content: AdoptersContent) -> None:
        """
        Print the verified adopters as a table, followed by a summary.

        Args:
            content: Loaded dataset.
        """
        table = Table(title="Verified Adopters", show_header=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Category", style="blue")
        table.add_column("Status", justify="center")
        table.add_column("Size", justify="right")
        table.add_column("Sources", justify="right")

        for rank, adopter in enumerate(content.adopters, start=1):
            status = (
                adopter.adoption_status.value
                if adopter.adoption_status is not None
                else "[dim]unknown[/dim]"
            )
            table.add_row(
                str(rank),
                escape(adopter.name),
                adopter.category.value,
                status,
                str(adopter.size),
                str(len(adopter.sources)),
            )

        self.console.print(table)
        self._print_summary(content)

    def _print_summary(self, content: AdoptersContent) -> None:
        """Print counts per category and for the unverified list."""
        counts = Counter(adopter.category for adopter in content.adopters)

        self.console.print()
        self.console.print(
            f"[green]{len(content.adopters)} verified adopters[/green], "
            f"{len(content.unverified)} unverified"
        )
        for category in Category:
            self.console.print(f"  {category.value}: {counts.get(category, 0)}")
        self.console.print(f"[dim]Last updated: {content.last_updated.isoformat()}[/dim]")

    def print_error(self, error: AdoptersError) -> None:
        """
        Print a load failure with the details a contributor needs to fix it.

        Args:
            error: The error that aborted the load.
        """
        self.console.print(f"[red]Load failed: {escape(str(error))}[/red]")
        if isinstance(error, SchemaError):
            self.console.print(f"  File: {escape(error.source_id)}")
            if error.field is not None:
                self.console.print(f"  Field: {escape(error.field)}")
        elif isinstance(error, DuplicateError):
            self.console.print(f"  Check: {error.check}")
            self.console.print(f"  Value: {escape(error.value)}")
