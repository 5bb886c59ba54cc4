import urllib.parse
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests
from click.testing import CliRunner

from word_muse.adapters.datamuse import DatamuseClient

CAT_RHYMES = [
    {"word": "hat", "score": 3035, "numSyllables": 1},
    {"word": "acrobat", "score": 2522, "numSyllables": 3},
    {"word": "that", "score": 2417, "numSyllables": 1},
    {"word": "format", "score": 2013, "numSyllables": 2},
    {"word": "thermostat", "score": 1590, "numSyllables": 3},
    {"word": "at bat", "score": 96},
]

CAT_SIMILAR = [
    {"word": "kitten", "score": 30012, "tags": ["n"]},
    {"word": "feline", "score": 29870, "tags": ["adj", "n"]},
    {"word": "tomcat", "score": 28011},
]


class FakeResponse:
    """Stands in for `requests.Response`."""

    __test__ = False

    def __init__(self, payload: Any = None, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """Stands in for `requests.Session`, answering by the relation of the query."""

    __test__ = False

    def __init__(
        self,
        responses: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.responses = responses if responses is not None else {}
        self.error = error
        self.requests: List[Tuple[str, Optional[float]]] = []
        self.closed = False

    def get(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        query = urllib.parse.parse_qs(urllib.parse.urlsplit(url).query)
        for relation, response in self.responses.items():
            if relation in query:
                if isinstance(response, FakeResponse):
                    return response
                return FakeResponse(response)
        return FakeResponse([])

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession({"rel_rhy": CAT_RHYMES, "ml": CAT_SIMILAR})


@pytest.fixture()
def failing_session() -> FakeSession:
    return FakeSession(error=requests.ConnectionError("connection refused"))


@pytest.fixture()
def client(session: FakeSession) -> DatamuseClient:
    return DatamuseClient(session=session)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def patch_session(monkeypatch):
    """Returns a function that makes new clients use the specified fake session."""

    def patch(fake: FakeSession) -> FakeSession:
        monkeypatch.setattr(requests, "Session", lambda: fake)
        return fake

    return patch
