import contextlib
import sys
import time
from typing import Iterator, Optional

from rich.console import Console


class Display:
    """Standardizes display elements for the application.

    Args:
        console: Rich console where output will be presented.
    """

    def __init__(self, console: Console, disable: Optional[bool] = None) -> None:
        self.console = console

        # Flag to disable animations (not necessarily output).
        if sys.stdout.isatty():
            self.disable = self.console.quiet if disable is None else disable
        else:
            self.disable = True

    @contextlib.contextmanager
    def status(self, message: str) -> Iterator[None]:
        """Context for displaying working status."""
        message = self._parse_message(message)

        if not self.disable:
            self.console.print(f"{message} [bold cyan]...[/]", end="")

        start = time.time()
        try:
            yield
        except Exception:
            self._clear_line()
            self.console.print(f"{message} [bold red]Failed[/]")
            raise
        elapsed = time.time() - start

        self._clear_line()
        self.console.print(f"{message} [bold cyan]Done ({elapsed:.1f}s)[/]")

    def _clear_line(self) -> None:
        if not self.disable:
            self.console.print("", end="\r")

    def _parse_message(self, message: str) -> str:
        message = message.strip()
        if message:
            message += ":"
        return " " + message
