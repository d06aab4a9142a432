"""Console reporter: FilterDoc -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterable

    from attrfirst.domain.model.doc import FilterDoc


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_snippets: Render usage examples under each filter.
        width: Console width in characters.
        force_terminal: Emit ANSI styles even when not writing to a tty.
    """

    show_snippets: bool = True
    width: int = 120
    force_terminal: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleDocReporter:
    """Renders filter documentation as rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, docs: Iterable[FilterDoc]) -> str:
        """Format documentation of every filter.

        Args:
            docs: Filter documentation, rendered in the given order.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        docs = tuple(docs)
        console.print()
        console.rule(f"[bold]FILTERS[/bold] ({len(docs)})")
        for doc in docs:
            self._render_doc(console, doc)

        return output.getvalue()

    def _render_doc(self, console: Console, doc: FilterDoc) -> None:
        console.print()
        console.print(f"[bold cyan]{escape(doc.name)}[/bold cyan]")
        console.print(escape(doc.description))

        if doc.params:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Param")
            table.add_column("Type")
            table.add_column("Default")
            table.add_column("Description")
            for param in doc.params:
                default = "[dim]required[/dim]" if param.required else escape(str(param.default))
                table.add_row(
                    escape(param.name),
                    escape(param.type),
                    default,
                    escape(param.description),
                )
            console.print(table)

        if self._config.show_snippets and doc.snippets:
            console.print("[bold]Examples:[/bold]")
            for snippet in doc.snippets:
                if snippet.description:
                    console.print(f"  [dim]{escape(snippet.description)}[/dim]")
                console.print(f"  {escape(snippet.code)}", highlight=False)
