"""Console output for contribution data."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .constants import GITHUB_DARK_PALETTE, NUM_DAYS
from .game.render_context import RenderContext
from .github_client import ContributionData

_DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class ContributionConsolePrinter:
    """Prints contribution stats and a miniature calendar with rich."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._context = RenderContext.lightmode()

    def display_stats(self, data: ContributionData) -> None:
        days = [day for week in data["weeks"] for day in week["days"] if day is not None]
        active_days = sum(1 for day in days if day["count"] > 0)
        best = max((day["count"] for day in days), default=0)

        table = Table(title=f"Contributions of {data.get('username') or 'unknown user'}")
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        table.add_row("Total contributions", str(data.get("total_contributions", 0)))
        table.add_row("Weeks", str(len(data["weeks"])))
        table.add_row("Days with data", str(len(days)))
        table.add_row("Active days", str(active_days))
        table.add_row("Best day", str(best))
        self.console.print(table)

    def display_contribution_graph(self, data: ContributionData) -> None:
        for row in range(NUM_DAYS):
            line = Text(f"{_DAY_LABELS[row]} ")
            for week in data["weeks"]:
                day = week["days"][row] if row < len(week["days"]) else None
                if day is None:
                    line.append(" ")
                    continue
                level = self._context.palette_index(day["color"])
                line.append("■", style=GITHUB_DARK_PALETTE[level] if level else "grey30")
            self.console.print(line)
