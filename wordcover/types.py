from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

WORD_LENGTH = 5
WORD_COUNT = 5
ALPHABET_SIZE = 26

Word = str
LetterMask = int
Solution = Tuple[LetterMask, ...]
MaskGroup = Dict[LetterMask, List[Word]]

@dataclass(frozen=True)
class MaskIndex:
    groups: MaskGroup
    candidates: List[LetterMask]
    words_read: int = 0
    five_letter_words: int = 0
    accepted_words: int = 0
