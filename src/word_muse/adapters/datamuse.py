"""Adapter for the Datamuse word-relation API.

Notes:
    Datamuse is queried with a single relation constraint per request, e.g.:
    * "https://api.datamuse.com/words?rel_rhy=cat" (perfect rhymes)
    * "https://api.datamuse.com/words?ml=cat" (words with a similar meaning)

    Every response is a JSON array of objects such as
    ``{"word": "hat", "score": 3028, "numSyllables": 1}``. For more information
    see the docs: https://www.datamuse.com/api/
"""

from __future__ import annotations

import enum
import logging
import urllib.parse
from typing import Any, List, Optional

import pydantic
import requests

from word_muse import WordMuseException
from word_muse.models import WordRecord

logger = logging.getLogger(__name__)

DATAMUSE_URL = "https://api.datamuse.com/words"
DEFAULT_TIMEOUT = 10.0


class Relation(str, enum.Enum):
    """Word relations supported by the lookup service."""

    RHYME = "rel_rhy"
    SIMILAR = "ml"


class DatamuseClient:
    """Client for the Datamuse ``/words`` endpoint.

    Args:
        url: Base URL of the ``/words`` endpoint.
        timeout: Seconds to wait for the service before giving up.
        session (optional): An existing requests session. If None, the client
            creates (and owns) a new session.

    Raises:
        DatamuseError: The URL is not an http(s) URL.
    """

    def __init__(
        self,
        url: str = DATAMUSE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if urllib.parse.urlsplit(url).scheme not in ("http", "https"):
            raise DatamuseError(f"Invalid service URL {url!r}")
        self._url = url.rstrip("?")
        self._timeout = timeout
        self._owns_session = session is None
        self._session = requests.Session() if session is None else session

    @property
    def url(self) -> str:
        """Returns the base URL of the endpoint."""
        return self._url

    @property
    def timeout(self) -> float:
        return self._timeout

    def build_url(
        self, relation: Relation, word: str, limit: Optional[int] = None
    ) -> str:
        """Returns the request URL for words related to a word.

        Args:
            relation: The word relation to query.
            word: The word to be related to.
            limit (optional): Maximum number of results requested from the service.
        """
        params = {Relation(relation).value: word}
        if limit:
            params["max"] = str(limit)
        return f"{self._url}?{urllib.parse.urlencode(params)}"

    def query(
        self, relation: Relation, word: str, limit: Optional[int] = None
    ) -> List[WordRecord]:
        """Queries the service for words related to a word.

        Args:
            relation: The word relation to query.
            word: The word to be related to.
            limit (optional): Maximum number of results requested from the service.

        Returns:
            Related words in the order returned by the service.

        Raises:
            DatamuseError: The request failed or the response could not be parsed.
        """
        url = self.build_url(relation, word, limit)
        logger.debug("Requesting %s", url)
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exception:
            raise DatamuseError(f"Request to {url} failed: {exception}") from exception
        except ValueError as exception:
            raise DatamuseError(f"Invalid JSON from {url}: {exception}") from exception

        records = parse_records(data)
        logger.debug("Received %d records from %s", len(records), url)
        return records

    def rhymes(self, word: str, limit: Optional[int] = None) -> List[WordRecord]:
        """Returns words that rhyme with a word."""
        return self.query(Relation.RHYME, word, limit)

    def similar(self, word: str, limit: Optional[int] = None) -> List[WordRecord]:
        """Returns words with a meaning similar to a word."""
        return self.query(Relation.SIMILAR, word, limit)

    def close(self) -> None:
        """Closes the underlying session if it is owned by the client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> DatamuseClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self):
        class_name = self.__class__.__name__
        return f"<{class_name}: url={self.url!r}>"


def parse_records(data: Any) -> List[WordRecord]:
    """Validates a decoded Datamuse response.

    Raises:
        DatamuseError: The response is not an array of word objects.
    """
    if not isinstance(data, list):
        raise DatamuseError(f"Expected a JSON array, got {type(data).__name__}")
    try:
        return [WordRecord.model_validate(item) for item in data]
    except pydantic.ValidationError as exception:
        raise DatamuseError(f"Unexpected response shape: {exception}") from exception


class DatamuseError(WordMuseException):
    """The Datamuse service could not be reached or returned an invalid response."""

    pass
