from __future__ import annotations
import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, Iterable, List, Optional
from .expand import combination_count, expand
from .masks import build_index, mask_letters, popcount
from .search import search
from .types import ALPHABET_SIZE, MaskGroup, MaskIndex, Solution

logger = logging.getLogger(__name__)

ALL_LETTERS = (1 << ALPHABET_SIZE) - 1

@dataclass
class SolveParams:
    workers: Optional[int] = None
    # Re-check every solution before returning.
    debug: bool = False

@dataclass(frozen=True)
class StageReport:
    label: str
    count: int
    elapsed_ms: float

    def format(self) -> str:
        return f"{self.count:>12,} {self.label} ({self.elapsed_ms:,.0f} ms)"

def elapsed_ms(since: float) -> float:
    return (perf_counter() - since) * 1000.0

@dataclass
class CoverResult:
    index: MaskIndex
    solutions: List[Solution]
    lines: List[str]
    stages: List[StageReport] = field(default_factory=list)

    def add_stage(self, label: str, count: int, ms: float) -> StageReport:
        report = StageReport(label=label, count=count, elapsed_ms=ms)
        self.stages.append(report)
        logger.info("%s: %d (%.0f ms)", label, count, ms)
        return report

    def summary(self) -> Dict[str, Any]:
        return {
            "stages": [
                {"label": s.label, "count": s.count, "elapsed_ms": round(s.elapsed_ms, 3)}
                for s in self.stages
            ],
            "unique_masks": len(self.index.candidates),
            "solution_masks": len(self.solutions),
            "solutions": len(self.lines),
        }

def check_solutions(solutions: List[Solution], groups: MaskGroup) -> int:
    """
    Re-verify every solution and log the letters it leaves out.
    Raises RuntimeError if a solution reuses a letter. Returns the number of
    word combinations before duplicates are dropped.
    """
    total = 0
    for solution in solutions:
        union = 0
        for mask in solution:
            union |= mask
        if popcount(union) != sum(popcount(mask) for mask in solution):
            raise RuntimeError(f"solution reuses a letter: {[mask_letters(m) for m in solution]}")
        count = combination_count(solution, groups)
        total += count
        logger.debug("Unused letters %s, %d combinations", mask_letters(ALL_LETTERS ^ union), count)
    return total

def solve_word_cover(raw_words: Iterable[str], params: Optional[SolveParams] = None) -> CoverResult:
    # Core entrypoint for the CLI: canonicalize -> search -> expand
    params = params or SolveParams()

    t0 = perf_counter()
    index = build_index(raw_words)
    index_ms = elapsed_ms(t0)

    t0 = perf_counter()
    solutions = search(index.candidates, workers=params.workers)
    search_ms = elapsed_ms(t0)

    t0 = perf_counter()
    lines = expand(solutions, index.groups)
    expand_ms = elapsed_ms(t0)

    result = CoverResult(index=index, solutions=solutions, lines=lines)
    # The index is built in one pass, so its counts share one timing.
    result.add_stage("Words read from input file", index.words_read, index_ms)
    result.add_stage("Found 5 letter words", index.five_letter_words, index_ms)
    result.add_stage("Calculated letter masks", index.accepted_words, index_ms)
    result.add_stage("Unique letter masks", len(index.candidates), index_ms)
    result.add_stage("Solution maps found", len(solutions), search_ms)
    result.add_stage("Total solutions found", len(lines), expand_ms)

    if params.debug:
        check_solutions(solutions, index.groups)
    return result
