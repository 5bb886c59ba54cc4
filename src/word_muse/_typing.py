from typing import List, Optional

from word_muse.group import Grouping
from word_muse.models import WordRecord

Word = str
Limit = Optional[int]
Output = str

RhymeGroups = Grouping[Optional[int], WordRecord]
WordRecords = List[WordRecord]
