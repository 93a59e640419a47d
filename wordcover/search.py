from __future__ import annotations
import itertools
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence
import numpy as np
from .types import WORD_COUNT, LetterMask, Solution

logger = logging.getLogger(__name__)

def disjoint_from(pool: np.ndarray, acc: int) -> np.ndarray:
    return pool[(pool & acc) == 0]

def extend_disjoint(pool: np.ndarray, acc: int, picked: Solution, remaining: int, out: List[Solution]) -> None:
    """
    Backtrack over `pool`, which holds the masks after the last pick that are
    already disjoint from `acc`. Appends every way of picking `remaining` more
    masks in increasing index order.
    """
    if len(pool) < remaining:
        return

    # Every mask left in the pool completes a solution.
    if remaining == 1:
        out.extend(picked + (mask,) for mask in pool.tolist())
        return

    masks = pool.tolist()
    for j, mask in enumerate(masks):
        if len(masks) - j < remaining:
            break
        merged = acc | mask
        rest = disjoint_from(pool[j + 1:], merged)
        if len(rest) < remaining - 1:
            continue
        extend_disjoint(rest, merged, picked + (mask,), remaining - 1, out)

def search_from(masks: np.ndarray, start: int, size: int, out: List[Solution]) -> None:
    """Find every solution whose lowest-index mask is masks[start]."""
    key = int(masks[start])
    if size == 1:
        out.append((key,))
        return
    rest = disjoint_from(masks[start + 1:], key)
    extend_disjoint(rest, key, (key,), size - 1, out)

def search(candidates: Sequence[LetterMask], workers: Optional[int] = None, size: int = WORD_COUNT) -> List[Solution]:
    """
    Enumerate every `size`-tuple of pairwise disjoint masks from `candidates`.

    Each tuple follows the candidates' index order, so every unordered set
    shows up once. The top-level start index is handed out from a shared
    counter to a fixed pool of worker threads; each worker keeps the
    solutions of one start index locally and merges them under the lock
    once that branch is done. Result order depends on scheduling.
    """
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    masks = np.asarray(candidates, dtype=np.uint32)
    if len(np.unique(masks)) != len(masks):
        raise ValueError("candidate masks must be distinct")

    cursor = itertools.count()
    results: List[Solution] = []
    lock = threading.Lock()

    def claim() -> int:
        with lock:
            return next(cursor)

    def worker() -> int:
        claimed = 0
        while True:
            start = claim()
            if start >= len(masks):
                break
            claimed += 1
            local: List[Solution] = []
            search_from(masks, start, size, local)
            if local:
                with lock:
                    results.extend(local)
        logger.debug("%s claimed %d start indices", threading.current_thread().name, claimed)
        return claimed

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordcover-search") as executor:
        futures = [executor.submit(worker) for _ in range(workers)]
    # Re-raise the first worker failure only after every worker has joined.
    claimed = sum(f.result() for f in futures)

    logger.info("Searched %d start indices with %d workers: %d solutions", claimed, workers, len(results))
    return results
