import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

from word_muse.adapters.datamuse import DatamuseClient
from word_muse.adapters.datamuse import DatamuseError
from word_muse.display import Display
from word_muse.group import groupby
from word_muse._typing import Limit, RhymeGroups, Word, WordRecords

logger = logging.getLogger(__name__)


def find_rhymes(
    word: Word,
    *,
    client: Optional[DatamuseClient] = None,
    limit: Limit = None,
    console: Optional[Console] = None,
) -> Optional[RhymeGroups]:
    """Finds words that rhyme with a word, grouped by syllable count.

    Lookup failures are logged and reported as None; an empty grouping means the
    service found no rhymes.
    """
    if client is None:
        with DatamuseClient() as client:
            return find_rhymes(word, client=client, limit=limit, console=console)

    console = console if console else Console(quiet=True)
    display = Display(console)

    try:
        with display.status(f"Searching rhymes for [bold cyan]{escape(word)}[/]"):
            records = client.rhymes(word, limit)
    except DatamuseError as exception:
        logger.error("Rhyme lookup for %r failed: %s", word, exception)
        return None

    return groupby(records, "num_syllables")


def find_similar(
    word: Word,
    *,
    client: Optional[DatamuseClient] = None,
    limit: Limit = None,
    console: Optional[Console] = None,
) -> Optional[WordRecords]:
    """Finds words with a meaning similar to a word, in service order.

    Lookup failures are logged and reported as None.
    """
    if client is None:
        with DatamuseClient() as client:
            return find_similar(word, client=client, limit=limit, console=console)

    console = console if console else Console(quiet=True)
    display = Display(console)

    try:
        message = f"Searching similar words for [bold cyan]{escape(word)}[/]"
        with display.status(message):
            records = client.similar(word, limit)
    except DatamuseError as exception:
        logger.error("Similar word lookup for %r failed: %s", word, exception)
        return None

    return records
