"""
Interactive menu session for the currency converter CLI
"""

import logging
from typing import Callable, Dict, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from currency_converter.cli.display import DisplayManager
from currency_converter.config import Config
from currency_converter.history.log import HistoryLog
from currency_converter.rates.store import RateStore
from currency_converter.utils.errors import ValidationError
from currency_converter.utils.validation import (
    normalize_currency_code,
    parse_amount,
    parse_currency_list,
    parse_rate,
)

logger = logging.getLogger(__name__)

EXIT_CHOICE = "7"

CHOICE_ALIASES = {
    "convert": "1",
    "add": "2",
    "list": "3",
    "compare": "4",
    "history": "5",
    "clear": "6",
    "exit": EXIT_CHOICE,
    "quit": EXIT_CHOICE,
}


class ConverterSession:
    """Menu loop wiring user input to the rate store and the history log"""

    def __init__(
        self,
        config: Config,
        store: Optional[RateStore] = None,
        history: Optional[HistoryLog] = None,
        display: Optional[DisplayManager] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        self.config = config
        self.store = store if store is not None else RateStore(config.cache_file)
        self.history = history if history is not None else HistoryLog(config.history_capacity)
        self.display = display or DisplayManager()
        self._input_func = input_func
        self._prompt_session: Optional[PromptSession] = None

        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.convert,
            "2": self.add_rate,
            "3": self.list_rates,
            "4": self.compare,
            "5": self.view_history,
            "6": self.clear_history,
        }

    @property
    def prompt_session(self) -> PromptSession:
        """Prompt toolkit session, created on first use"""
        if self._prompt_session is None:
            self._prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=WordCompleter(list(CHOICE_ALIASES), ignore_case=True),
            )
        return self._prompt_session

    def _ask(self, prompt: str) -> str:
        if self._input_func is not None:
            return self._input_func(prompt).strip()
        return self.prompt_session.prompt(prompt).strip()

    def seed_default_rates(self) -> None:
        """Add the configured default rates, overwriting stored ones"""
        for entry in self.config.default_rates:
            self.store.add_rate(entry["from"], entry["to"], entry["rate"])
        logger.info("Seeded %d default rates", len(self.config.default_rates))

    def run(self) -> None:
        """Run the menu until the user exits"""

        if self.config.seed_defaults:
            self.seed_default_rates()

        self.display.print_header(
            self.config.app_name,
            subtitle=f"v{self.config.app_version} | {len(self.store)} rates available",
        )

        while True:
            self.display.show_menu()
            try:
                choice = self._ask("\nEnter choice: ")
                if not self.handle_choice(choice):
                    break
            except KeyboardInterrupt:
                self.display.show_warning("Cancelled")
            except EOFError:
                self.display.console.print("Goodbye!")
                break
            except ValidationError as e:
                self.display.show_error(str(e))
            except Exception as e:
                logger.debug("Menu action failed", exc_info=True)
                self.display.show_error(f"Error: {e}")
                if self.config.debug:
                    self.display.console.print_exception()

    def handle_choice(self, choice: str) -> bool:
        """Run one menu action; returns False when the session should end"""

        key = choice.strip().lower()
        key = CHOICE_ALIASES.get(key, key)

        if key == EXIT_CHOICE:
            self.display.console.print("Goodbye!")
            return False

        action = self._actions.get(key)
        if action is None:
            self.display.show_error("Invalid choice")
            return True

        action()
        return True

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------
    def convert(self) -> None:
        amount = parse_amount(self._ask("Amount: "))
        from_currency = normalize_currency_code(self._ask("From currency (e.g., USD): "))
        to_currency = normalize_currency_code(self._ask("To currency (e.g., EUR): "))

        result = self.store.convert(amount, from_currency, to_currency)
        if result is None:
            self.display.show_warning("Exchange rate not available")
            return

        self.display.show_conversion(amount, from_currency, result, to_currency)
        self.history.record(amount, from_currency, to_currency, result)

    def add_rate(self) -> None:
        from_currency = normalize_currency_code(self._ask("From currency: "))
        to_currency = normalize_currency_code(self._ask("To currency: "))
        try:
            rate = parse_rate(self._ask("Exchange rate: "))
        except ValidationError as e:
            self.display.show_error(f"Invalid rate ({e})")
            return

        self.store.add_rate(from_currency, to_currency, rate)
        self.display.show_success("Rate added")

    def list_rates(self) -> None:
        self.display.show_rates(self.store.list_rates())

    def compare(self) -> None:
        amount = parse_amount(self._ask("Amount: "))
        from_currency = normalize_currency_code(self._ask("From currency: "))
        targets = parse_currency_list(self._ask("Target currencies (comma-separated): "))

        results = self.store.compare_rates(amount, from_currency, targets)
        self.display.show_comparison(amount, from_currency, results)

    def view_history(self) -> None:
        recent = self.history.recent(self.config.history_display_count)
        first_position = len(self.history) - len(recent) + 1
        self.display.show_history(recent, first_position)

    def clear_history(self) -> None:
        self.history.clear()
        self.display.show_success("History cleared")
