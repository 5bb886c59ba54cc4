__version__ = "0.1.0"


class WordMuseException(Exception):
    """Base exception for the word-muse application."""

    pass
