from __future__ import annotations
import logging
from itertools import product
from math import prod
from typing import Iterable, Iterator, List, Set, Tuple
from .types import MaskGroup, Solution, Word

logger = logging.getLogger(__name__)

def resolve_solution(solution: Solution, groups: MaskGroup) -> Iterator[Tuple[Word, ...]]:
    """
    Every concrete word combination for one solution, one word per mask.
    Words in each combination are sorted, so the same set of words always
    comes out the same way.
    """
    for words in product(*(groups[mask] for mask in solution)):
        yield tuple(sorted(words))

def combination_count(solution: Solution, groups: MaskGroup) -> int:
    return prod(len(groups[mask]) for mask in solution)

def format_combination(words: Iterable[Word]) -> str:
    return " ".join(words)

def expand(solutions: Iterable[Solution], groups: MaskGroup) -> List[str]:
    lines: Set[str] = set()
    resolved = 0
    for solution in solutions:
        for words in resolve_solution(solution, groups):
            lines.add(format_combination(words))
            resolved += 1

    if resolved != len(lines):
        logger.debug("Dropped %d duplicate combinations", resolved - len(lines))
    return sorted(lines)
