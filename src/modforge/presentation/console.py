"""Console reporter: BuildPlan -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from modforge.domain.model.build_plan import BuildPlan


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_links: Show each module's full link line
        width: Console width in characters
        color: Emit ANSI styles
    """

    show_links: bool = True
    width: int = 120
    color: bool = True


class ConsoleReporter:
    """Renders a build plan as a table.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        self._config = config or ConsoleConfig()

    def report(self, plan: BuildPlan) -> str:
        """Format plan as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.rule("[bold]BUILD PLAN[/bold]")
        console.print(
            f"[bold]Modules:[/bold] {len(plan.units)}  "
            f"[bold]Installed:[/bold] {len(plan.installs)}  "
            f"[bold]Configure depends:[/bold] {len(plan.configure_depends)}"
        )

        table = Table(show_lines=False)
        table.add_column("Module", style="cyan")
        table.add_column("Kind")
        table.add_column("Sources", justify="right")
        table.add_column("Generated", justify="right")
        table.add_column("Install")
        if self._config.show_links:
            table.add_column("Link line")

        for name in plan.order:
            unit = plan.units[name]
            row = [
                name,
                unit.target_kind.value,
                str(len(unit.sources)),
                str(len(unit.artifacts)),
                unit.install.library if unit.install is not None else "[dim]excluded[/dim]",
            ]
            if self._config.show_links:
                row.append(" ".join(str(item) for item in plan.link_closure(name)) or "-")
            table.add_row(*row)

        console.print(table)
        return output.getvalue()

    def report_error(self, error: Exception) -> str:
        """Format a fatal configuration error."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )
        console.print(f"[bold red]CONFIGURATION FAILED[/bold red] ({type(error).__name__})")
        console.print(f"  {error}", markup=False)
        return output.getvalue()
