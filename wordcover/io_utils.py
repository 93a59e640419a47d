from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def parse_words(text: str) -> List[str]:
    """
    Split dictionary text into entries, one per line.
    Blank lines are dropped; case and inner characters are left for the
    canonicalizer to judge.
    """
    return [line.strip() for line in text.splitlines() if line.strip()]

def read_words(path: PathLike) -> List[str]:
    # Raises FileNotFoundError before any search work starts.
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    words = parse_words(text)
    logger.info("Read %d entries from %s", len(words), path)
    return words

def write_lines(lines: Iterable[str], path: PathLike) -> int:
    count = 0
    with Path(path).open("w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")
            count += 1
    logger.info("Wrote %d lines to %s", count, path)
    return count
