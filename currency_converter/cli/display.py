"""
Display system for the currency converter CLI
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from currency_converter.history.models import Conversion
from currency_converter.rates.models import ExchangeRate, RateComparison

MENU_OPTIONS = [
    ("1", "Convert Currency"),
    ("2", "Add Exchange Rate"),
    ("3", "List All Rates"),
    ("4", "Compare Rates"),
    ("5", "View History"),
    ("6", "Clear History"),
    ("7", "Exit"),
]


class DisplayManager:
    """Manages all CLI display operations using Rich"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(width=100)

    def show_menu(self, title: str = "Currency Converter") -> None:
        """Print the main menu"""
        menu = Table(show_header=False, box=None, padding=(0, 1))
        menu.add_column("Choice", style="bold cyan", justify="right")
        menu.add_column("Action")
        for key, label in MENU_OPTIONS:
            menu.add_row(f"{key}.", label)

        self.console.print()
        self.console.print(Panel(menu, title=title, border_style="blue", expand=False))

    def show_conversion(self, amount: float, from_currency: str, result: float, to_currency: str) -> None:
        self.console.print(
            f"\n[bold]{amount:.2f} {from_currency}[/bold] = "
            f"[bold green]{result:.2f} {to_currency}[/bold green]"
        )

    def show_rates(self, rates: List[ExchangeRate]) -> None:
        """Display every stored rate"""

        if not rates:
            self.console.print("[yellow]No exchange rates available[/yellow]")
            return

        table = Table(title="Exchange Rates", box=box.ROUNDED)
        table.add_column("Pair", style="bold cyan")
        table.add_column("Rate", justify="right")
        table.add_column("Recorded", style="dim")

        for rate in rates:
            table.add_row(
                f"{rate.from_currency} -> {rate.to_currency}",
                str(rate.rate),
                rate.recorded_at.strftime("%Y-%m-%d %H:%M:%S"),
            )

        self.console.print(table)

    def show_comparison(self, amount: float, from_currency: str, results: List[RateComparison]) -> None:
        """Display one converted value (or a not-available marker) per target"""

        table = Table(
            title="Currency Comparison",
            caption=f"Amount: {amount:g} {from_currency}",
            box=box.ROUNDED,
        )
        table.add_column("Currency", style="bold cyan")
        table.add_column("Value", justify="right")

        for item in results:
            value = item.display if item.available else f"[red]{item.display}[/red]"
            table.add_row(item.target, value)

        self.console.print(table)

    def show_history(self, conversions: List[Conversion], first_position: int = 1) -> None:
        """
        Display recent conversions.

        Args:
            conversions: Entries to show, oldest first
            first_position: Position of the first entry within the whole log
        """

        if not conversions:
            self.console.print("[yellow]No conversion history[/yellow]")
            return

        table = Table(title="Conversion History", box=box.ROUNDED)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Conversion")
        table.add_column("When", style="dim")

        for position, conversion in enumerate(conversions, first_position):
            table.add_row(str(position), conversion.summary(), conversion.formatted_timestamp)

        self.console.print(table)

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/green]")

    def show_warning(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")

    def print_header(self, title: str, subtitle: str = "") -> None:
        """Print a styled header"""
        self.console.print(Panel(
            Text(title, style="bold blue"),
            subtitle=subtitle,
            border_style="blue"
        ))
