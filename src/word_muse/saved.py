from typing import Iterable, Iterator, List

DELIMITER = ","


class SavedWords:
    """An append-only, order-preserving list of bookmarked words.

    Args:
        words (optional): Words saved before the list was created.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: List[str] = list(words)

    def add(self, word: str) -> None:
        """Appends a word to the end of the list. Duplicates are kept."""
        self._words.append(word)

    def render(self) -> str:
        """Returns the delimited text rendering of the saved words."""
        return DELIMITER.join(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self):
        class_name = self.__class__.__name__
        return f"<{class_name}: {self.render()!r}>"
