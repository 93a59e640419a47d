from __future__ import annotations
import argparse
import json
import logging
import sys
from time import perf_counter
from typing import List, Optional
from wordcover.app import CoverResult, SolveParams, StageReport, elapsed_ms, solve_word_cover
from wordcover.io_utils import read_words, write_lines

def print_status(report: StageReport) -> None:
    print(report.format())

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find five five-letter words with 25 distinct letters")
    parser.add_argument("--input", type=str, default="./words_alpha.txt", help="Dictionary file, one word per line.")
    parser.add_argument("--output", type=str, default="wordle.txt", help="File to write the word combinations to.")
    parser.add_argument("--workers", type=int, default=None, help="Search threads (default: one per CPU).")
    parser.add_argument("--debug", action="store_true", help="Print debug diagnostics.")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of status lines.")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.workers is not None and args.workers < 1:
        print(f"Input error: --workers must be at least 1, got {args.workers}", file=sys.stderr)
        return 1

    start = perf_counter()
    if not args.json:
        print("BEGIN")

    try:
        words = read_words(args.input)
    except OSError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 1

    params = SolveParams(workers=args.workers, debug=args.debug)
    result: CoverResult = solve_word_cover(words, params)

    t0 = perf_counter()
    written = write_lines(result.lines, args.output)
    result.add_stage("Solutions written to file", written, elapsed_ms(t0))

    if args.json:
        payload = result.summary()
        payload["output"] = args.output
        payload["elapsed_ms"] = round(elapsed_ms(start), 3)
        print(json.dumps(payload, indent=2))
        return 0

    for report in result.stages:
        print_status(report)
    print(f"END ({elapsed_ms(start):,.0f} ms)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
