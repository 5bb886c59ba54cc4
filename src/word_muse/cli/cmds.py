from typing import TYPE_CHECKING

from rich.console import Console

import word_muse.api as api
from word_muse import WordMuseException
from word_muse import __version__
from word_muse.adapters.datamuse import DatamuseClient
from word_muse.cli.params import configuration_option
from word_muse.cli.params import debug_option
from word_muse.cli.params import limit_option
from word_muse.cli.params import output_option
from word_muse.cli.params import quiet_option
from word_muse.cli.params import timeout_option
from word_muse.cli.params import url_option
from word_muse.cli.state import AppState
from word_muse.cli.state import pass_state
from word_muse.output import print_rhymes
from word_muse.output import print_similar
from word_muse.session import WordSession

# mypy has issues with the dynamic nature of rich-click
if TYPE_CHECKING:  # pragma: no cover
    import click
else:
    import rich_click as click

    click.rich_click.MAX_WIDTH = 100
    click.rich_click.STYLE_ABORTED = "bold red"
    click.rich_click.STYLE_ERRORS_PANEL_BORDER = "bold red"
    click.rich_click.STYLE_OPTIONS_TABLE_BOX = "SIMPLE"
    click.rich_click.STYLE_REQUIRED_LONG = "bold red"
    click.rich_click.STYLE_REQUIRED_SHORT = "bold red"
    click.rich_click.STYLE_ERRORS_SUGGESTION = "bold"
    click.rich_click.USE_MARKDOWN = True


# Root command
@click.group()
@click.version_option(prog_name="word-muse", version=__version__)
def app():
    """Find rhymes and words with a similar meaning using the Datamuse API."""
    pass


# Sub-command: rhymes
@app.command(short_help="Show words that rhyme with a word.")
@click.argument("word", nargs=1, type=click.STRING)
@url_option
@limit_option
@timeout_option
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
def rhymes(state: AppState, word: str):
    """Show words that rhyme with WORD, grouped by their number of syllables.

    - Groups are ordered by ascending syllable count

    - Words without a known syllable count are listed last
    """
    if state.output == "json":
        state.quiet = True

    console = Console(quiet=state.quiet)

    try:
        with DatamuseClient(state.url, timeout=state.timeout) as client:
            groups = api.find_rhymes(
                word, client=client, limit=state.limit, console=console
            )
    except WordMuseException as exception:
        _process_application_exception(exception)
        return

    if groups is None:
        # Failure has already been logged, nothing is rendered
        click.get_current_context().exit(1)
    print_rhymes(state.output, groups)


# Sub-command: similar
@app.command(short_help="Show words with a similar meaning to a word.")
@click.argument("word", nargs=1, type=click.STRING)
@url_option
@limit_option
@timeout_option
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
def similar(state: AppState, word: str):
    """Show words with a meaning similar to WORD, most relevant first."""
    if state.output == "json":
        state.quiet = True

    console = Console(quiet=state.quiet)

    try:
        with DatamuseClient(state.url, timeout=state.timeout) as client:
            records = api.find_similar(
                word, client=client, limit=state.limit, console=console
            )
    except WordMuseException as exception:
        _process_application_exception(exception)
        return

    if records is None:
        click.get_current_context().exit(1)
    print_similar(state.output, records)


# Sub-command: session
@app.command(short_help="Start an interactive lookup session.")
@url_option
@limit_option
@timeout_option
@output_option
@configuration_option
@quiet_option
@debug_option
@pass_state
def session(state: AppState):
    """Start an interactive session for looking up and saving words.

    - Look up words with `rhymes WORD` or `similar WORD`

    - Save a result with `save N`, where N is the number of its row

    - Saved words are kept until the session ends (`quit`)
    """
    console = Console()
    status_console = Console(quiet=state.quiet)

    try:
        client = DatamuseClient(state.url, timeout=state.timeout)
    except WordMuseException as exception:
        _process_application_exception(exception)
        return

    with client:
        word_session = WordSession(
            client,
            console=console,
            status_console=status_console,
            output=state.output,
            limit=state.limit,
        )
        console.print("Type 'help' for a list of commands.")
        while True:
            try:
                line = click.prompt(
                    "word-muse", default="", show_default=False, prompt_suffix="> "
                )
            except click.Abort:
                # End of input
                break
            if not word_session.handle(line):
                break


def _process_application_exception(exception: WordMuseException) -> None:
    click.secho("\n\n ERROR: ", fg="red", bold=True, nl=False)
    click.secho(exception.args[0])
    click.get_current_context().exit(1)
