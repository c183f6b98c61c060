"""Command that counts the words in standard input, one line at a time."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterator, List, Optional

from .dictionary import load_dict
from .wordcut import Wordcut


def _lines(text: str) -> Iterator[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part.removesuffix("\r")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mapkha", description="Count the words in standard input."
    )
    parser.add_argument("-dix", "--dix", required=True, help="Dictionary path")
    parser.add_argument("-cpupprof", "--cpupprof", default="cpu.pprof", help="CPU profile file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Segment every line of standard input and print the total number of words."""
    args = _parser().parse_args(argv)

    try:
        profile = open(args.cpupprof, "w", encoding="utf-8")
    except OSError as exc:
        print(f"could not create CPU profile: {exc}", file=sys.stderr)
        return 1

    with profile:
        started = time.process_time()
        try:
            try:
                dictionary = load_dict(args.dix)
            except OSError as exc:
                print(exc, file=sys.stderr)
                return 1

            wordcut = Wordcut(dictionary)
            try:
                data = sys.stdin.read()
            except (OSError, UnicodeDecodeError) as exc:
                print(f"could not read input: {exc}", file=sys.stderr)
                return 1

            count = sum(len(wordcut.segment(line)) for line in _lines(data))
            print(count)
            return 0
        finally:
            profile.write(f"cpu_seconds {time.process_time() - started:.6f}\n")


if __name__ == "__main__":
    raise SystemExit(main())