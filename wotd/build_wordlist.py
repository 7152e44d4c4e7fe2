# wotd/build_wordlist.py
"""
Turn a raw dictionary CSV into the word list the daily job samples from.
Run: python -m wotd.build_wordlist dict.csv [--output wordlist.json]
"""
from __future__ import annotations

import argparse
import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Optional

from .store import JsonStore

DATA_DIR = Path(os.getenv("WOTD_DATA_DIR", Path(__file__).parent / "data"))
WORDLIST_PATH = Path(os.getenv("WOTD_WORDLIST_PATH", DATA_DIR / "wordlist.json"))

MIN_LEN = 3
_WORD = re.compile(r"^[a-zA-Z]+$")

logger = logging.getLogger(__name__)


def is_candidate(token: str) -> bool:
    return len(token) >= MIN_LEN and bool(_WORD.match(token))


def extract_words(lines: Iterable[str], separator: str = ",") -> List[str]:
    """First field of each line, filtered to plain ASCII words, first occurrence wins."""
    seen = set()
    out: List[str] = []
    for line in lines:
        token = line.split(separator, 1)[0].strip()
        if not is_candidate(token) or token in seen:
            continue
        seen.add(token)
        out.append(token)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build the word-of-the-day word list from a CSV.")
    parser.add_argument("source", nargs="?", default=str(DATA_DIR / "dict.csv"), help="raw CSV, one entry per line")
    parser.add_argument("--output", default=str(WORDLIST_PATH), help="where to write the JSON word list")
    parser.add_argument("--separator", default=",", help="field separator (default: comma)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv("WOTD_LOG_LEVEL", "INFO").upper())
    logger.info("Starting dictionary preparation from %s", args.source)

    with open(args.source, "r", encoding="utf-8-sig") as f:
        words = extract_words(f, separator=args.separator)

    JsonStore(args.output, List[str], list).save(words)
    logger.info("Dictionary prepared! %d unique words saved to %s", len(words), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
