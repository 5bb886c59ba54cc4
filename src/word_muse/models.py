from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class WordRecord(BaseModel):
    """Represents a single word returned by the Datamuse API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word: str
    score: Optional[Union[int, float]] = None
    num_syllables: Optional[int] = Field(None, alias="numSyllables")
    tags: Optional[Tuple[str, ...]] = None

    def dump(self) -> Dict[str, Any]:
        """Returns the record in the shape used by the Datamuse API."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        return self.word
