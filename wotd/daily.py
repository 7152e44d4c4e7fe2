# wotd/daily.py
from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Callable, List, Optional, Protocol

import pytz

from .schema import WORDS_PER_DAY, DailyRun, WordRecord
from .store import Stores

logger = logging.getLogger(__name__)


class WordLookup(Protocol):
    async def get_word_details(self, word: str) -> Optional[WordRecord]: ...


def today_key(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(pytz.utc)
    if now.tzinfo is not None:
        now = now.astimezone(pytz.utc)
    return now.strftime("%Y-%m-%d")


def available_words(corpus: List[str], used: List[str]) -> List[str]:
    used_set = set(used)
    seen: set = set()
    out: List[str] = []
    for w in corpus:
        if w in used_set or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


async def ensure_today(
    stores: Stores,
    client: WordLookup,
    *,
    now: Optional[datetime] = None,
    pick: Callable[[int], int] = secrets.randbelow,
) -> DailyRun:
    """
    Make sure today's three words exist. Safe to call any number of times:
    once the date is in history nothing else happens.
    """
    ymd = today_key(now)

    history = stores.history.load()
    if ymd in history:
        logger.info("Words for %s already exist. No update needed.", ymd)
        return DailyRun(date=ymd, status="exists", words=history[ymd])

    logger.info("Generating new words for %s", ymd)
    used = stores.ledger.load()
    pool = available_words(stores.corpus.load(), used)

    if len(pool) < WORDS_PER_DAY:
        logger.warning("Not enough new words available (%d left)", len(pool))
        return DailyRun(date=ymd, status="insufficient")

    chosen: List[str] = []
    records: List[WordRecord] = []
    while len(records) < WORDS_PER_DAY and pool:
        word = pool.pop(pick(len(pool)))
        details = await client.get_word_details(word)
        if details is None:
            logger.info("skipping %r", word)
            continue
        chosen.append(word)
        records.append(details)

    if len(records) < WORDS_PER_DAY:
        logger.error("Failed to fetch details for %d new words (got %d)", WORDS_PER_DAY, len(records))
        return DailyRun(date=ymd, status="shortfall")

    # ledger first, so a dated entry never exists without its words marked used
    stores.ledger.save(used + chosen)
    history[ymd] = records
    try:
        stores.history.save(history)
    except Exception:
        logger.exception("history save failed for %s; restoring ledger", ymd)
        stores.ledger.save(used)
        raise

    logger.info("Saved words for %s: %s", ymd, ", ".join(chosen))
    return DailyRun(date=ymd, status="committed", words=records)
