from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from word_muse.models import WordRecord
from word_muse.saved import SavedWords
from word_muse._typing import Output, RhymeGroups, WordRecords

OUTPUTS = ["table", "list", "json"]
NO_RESULT = "no result"


def print_rhymes(
    output: Output, groups: RhymeGroups, console: Optional[Console] = None
) -> WordRecords:
    """Prints rhymes with one heading per syllable count.

    Returns:
        The printed records in display order. Row numbers shown to the user are
        1-based positions in this list.
    """
    console = console if console else Console(quiet=False)
    rows: List[WordRecord] = [record for group in groups.values() for record in group]

    if output == "json":
        data = {
            key: [record.dump() for record in group] for key, group in groups.items()
        }
        console.print_json(data=data)
    elif not rows:
        console.print(NO_RESULT)
    elif output == "table":
        number = 0
        for key, group in groups.items():
            heading = syllables_heading(key)
            _print_output_table(console, group, heading, start=number + 1)
            number += len(group)
    elif output == "list":
        number = 0
        for key, group in groups.items():
            console.print("\n" + syllables_heading(key))
            _print_output_list(console, group, start=number + 1)
            number += len(group)
    return rows


def print_similar(
    output: Output, records: WordRecords, console: Optional[Console] = None
) -> WordRecords:
    """Prints words with a similar meaning as a flat list.

    Returns:
        The printed records in display order.
    """
    console = console if console else Console(quiet=False)
    rows = list(records)

    if output == "json":
        console.print_json(data=[record.dump() for record in rows])
    elif not rows:
        console.print(NO_RESULT)
    elif output == "table":
        _print_output_table(console, rows, f"Words ({len(rows)})")
    elif output == "list":
        _print_output_list(console, rows)
    return rows


def print_saved(saved: SavedWords, console: Optional[Console] = None) -> None:
    console = console if console else Console(quiet=False)
    text = escape(saved.render()) if saved else "(none)"
    console.print(f"Saved words: [bold green]{text}[/]", highlight=False)


def syllables_heading(key: Optional[int]) -> str:
    """Returns the heading of a group of rhymes."""
    label = "unknown" if key is None else key
    return f"Syllables: {label}"


def _print_output_table(
    console: Console, records: Iterable[WordRecord], label: str, start: int = 1
) -> None:
    table = Table(title=label, title_justify="left", show_header=True, box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Word")
    table.add_column("Score", justify="right")

    for number, record in enumerate(records, start=start):
        score = "" if record.score is None else f"{record.score}"
        table.add_row(f"{number}", escape(record.word), score)
    console.print(table)


def _print_output_list(
    console: Console, records: Iterable[WordRecord], start: int = 1
) -> None:
    for number, record in enumerate(records, start=start):
        console.print(f"{number:>4}. {record.word}", highlight=False, markup=False)
