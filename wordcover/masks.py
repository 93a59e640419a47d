from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple
from .types import ALPHABET_SIZE, WORD_LENGTH, LetterMask, MaskGroup, MaskIndex, Word

logger = logging.getLogger(__name__)

def normalize_word(raw: str) -> str:
    return raw.strip().lower()

def letter_index(letter: str) -> int:
    return ord(letter) - ord("a")

def letter_mask(word: Word) -> Optional[LetterMask]:
    """
    Bitmask of the letters in `word`, bit 0 for 'a' up to bit 25 for 'z'.
    Returns None if a letter repeats or falls outside a-z.
    """
    mask = 0
    for letter in word:
        i = letter_index(letter)
        if not 0 <= i < ALPHABET_SIZE:
            return None
        bit = 1 << i
        if mask & bit:
            return None
        mask |= bit
    return mask

def canonicalize_word(raw: str) -> Optional[Tuple[Word, LetterMask]]:
    word = normalize_word(raw)
    if len(word) != WORD_LENGTH:
        return None
    mask = letter_mask(word)
    if mask is None:
        return None
    return word, mask

def popcount(mask: LetterMask) -> int:
    return bin(mask).count("1")

def mask_letters(mask: LetterMask) -> str:
    return "".join(chr(ord("a") + i) for i in range(ALPHABET_SIZE) if mask >> i & 1)

def build_index(raw_words: Iterable[str]) -> MaskIndex:
    """
    Group accepted words by letter mask.
    Words keep their dictionary order inside a group (repeats of the same word
    are kept once); candidates are the distinct masks in ascending order.
    """
    groups: MaskGroup = {}
    words_read = 0
    five_letter = 0
    accepted = 0

    for raw in raw_words:
        words_read += 1
        if len(normalize_word(raw)) == WORD_LENGTH:
            five_letter += 1
        entry = canonicalize_word(raw)
        if entry is None:
            continue
        accepted += 1
        word, mask = entry
        group = groups.setdefault(mask, [])
        if word not in group:
            group.append(word)

    candidates: List[LetterMask] = sorted(groups)
    logger.info(
        "Indexed %d words: %d of length %d, %d accepted, %d unique masks",
        words_read, five_letter, WORD_LENGTH, accepted, len(candidates),
    )
    return MaskIndex(
        groups=groups,
        candidates=candidates,
        words_read=words_read,
        five_letter_words=five_letter,
        accepted_words=accepted,
    )

def canonicalize(raw_words: Iterable[str]) -> Tuple[MaskGroup, List[LetterMask]]:
    index = build_index(raw_words)
    return index.groups, index.candidates
