import logging
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from word_muse import WordMuseException
from word_muse import api
from word_muse.adapters.datamuse import DatamuseClient
from word_muse.models import WordRecord
from word_muse.output import print_rhymes, print_saved, print_similar
from word_muse.saved import SavedWords
from word_muse._typing import Limit, Output

logger = logging.getLogger(__name__)

HELP = """\
Commands:
  rhymes WORD    Show words that rhyme with WORD
  similar WORD   Show words with a similar meaning to WORD
  save N         Save the word in row N of the current results
  saved          Show the saved words
  help           Show this message
  quit           End the session"""


class InvalidCommand(WordMuseException):
    """A session command could not be interpreted."""

    pass


class WordSession:
    """Interprets interactive lookup and save commands.

    The rows of the most recently rendered results form the current view. Rows
    are referenced by their 1-based number when saving words.

    Args:
        client: Client used for all lookups.
        console: Rich console where results will be presented.
        status_console (optional): Console used for status animations. If None,
            status output is suppressed.
        output: Format of rendered results.
        limit (optional): Maximum number of results per lookup.
    """

    def __init__(
        self,
        client: DatamuseClient,
        *,
        console: Console,
        status_console: Optional[Console] = None,
        output: Output = "table",
        limit: Limit = None,
    ) -> None:
        self.client = client
        self.console = console
        self.status_console = status_console
        self.output = output
        self.limit = limit
        self.saved = SavedWords()
        self.rows: List[WordRecord] = []
        self._commands: Dict[str, Callable[[str], None]] = {
            "rhymes": self.show_rhymes,
            "similar": self.show_similar,
            "save": self.save,
            "saved": self.show_saved,
            "help": self.show_help,
        }

    def handle(self, line: str) -> bool:
        """Runs a single command line.

        Returns:
            False if the session should end, True otherwise.
        """
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        if not command:
            return True
        if command in ("quit", "exit"):
            return False

        try:
            if command not in self._commands:
                raise InvalidCommand(f"Unknown command {command!r}, try 'help'")
            self._commands[command](argument.strip())
        except InvalidCommand as exception:
            message = escape(exception.args[0])
            self.console.print(f"[bold red]{message}[/]", highlight=False)
        return True

    def show_rhymes(self, word: str) -> None:
        word = _require_word(word, "rhymes")
        groups = api.find_rhymes(
            word, client=self.client, limit=self.limit, console=self.status_console
        )
        if groups is None:
            return
        self.console.print(
            f"Words that rhyme with [bold]{escape(word)}[/]", highlight=False
        )
        self.rows = print_rhymes(self.output, groups, self.console)

    def show_similar(self, word: str) -> None:
        word = _require_word(word, "similar")
        records = api.find_similar(
            word, client=self.client, limit=self.limit, console=self.status_console
        )
        if records is None:
            return
        self.console.print(
            f"Words with a similar meaning to [bold]{escape(word)}[/]", highlight=False
        )
        self.rows = print_similar(self.output, records, self.console)

    def save(self, argument: str) -> None:
        try:
            number = int(argument)
        except ValueError:
            raise InvalidCommand("Usage: save N") from None
        if not 1 <= number <= len(self.rows):
            raise InvalidCommand(f"No result numbered {number}")

        word = self.rows[number - 1].word
        self.saved.add(word)
        logger.debug("Saved %r", word)
        print_saved(self.saved, self.console)

    def show_saved(self, argument: str = "") -> None:
        print_saved(self.saved, self.console)

    def show_help(self, argument: str = "") -> None:
        self.console.print(HELP, highlight=False, markup=False)


def _require_word(word: str, command: str) -> str:
    if not word:
        raise InvalidCommand(f"Usage: {command} WORD")
    return word
