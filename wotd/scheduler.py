# wotd/scheduler.py
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple

import pytz

from .daily import WordLookup, ensure_today
from .schema import DailyRun
from .store import Stores

logger = logging.getLogger(__name__)


def parse_run_at(value: str) -> Tuple[int, int]:
    hour, _, minute = value.strip().partition(":")
    h, m = int(hour), int(minute or 0)
    if not (0 <= h < 24 and 0 <= m < 60):
        raise ValueError(f"invalid run time: {value!r}")
    return h, m


def seconds_until(hour: int, minute: int, now: Optional[datetime] = None) -> float:
    """Seconds from `now` to the next hh:mm UTC (strictly in the future)."""
    now = (now or datetime.now(pytz.utc)).astimezone(pytz.utc)
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return (target - now).total_seconds()


class DailyScheduler:
    def __init__(self, stores: Stores, client: WordLookup, run_at: str = "00:01"):
        self.stores = stores
        self.client = client
        self.hour, self.minute = parse_run_at(run_at)
        self._lock = asyncio.Lock()
        self._task: Optional[asyncio.Task] = None

    async def run_once(self) -> DailyRun:
        async with self._lock:
            result = await ensure_today(self.stores, self.client)
        logger.info("daily run for %s: %s", result.date, result.status)
        return result

    async def _run(self):
        while True:
            try:
                await self.run_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("daily word update failed")
            delay = seconds_until(self.hour, self.minute)
            logger.debug("next daily run in %.0fs", delay)
            await asyncio.sleep(delay)

    def start(self):
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run())

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
