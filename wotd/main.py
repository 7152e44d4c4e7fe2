# wotd/main.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .daily import WordLookup
from .dictionary_client import DictionaryClient
from .history import DateNotFound, get_words, list_dates
from .scheduler import DailyScheduler
from .schema import DailyRun, WordRecord
from .store import StoreError, Stores

# ───────── Config ─────────
DATA_DIR = Path(os.getenv("WOTD_DATA_DIR", Path(__file__).parent / "data"))
WORDLIST_PATH = Path(os.getenv("WOTD_WORDLIST_PATH", DATA_DIR / "wordlist.json"))
USED_WORDS_PATH = Path(os.getenv("WOTD_USED_WORDS_PATH", DATA_DIR / "used_words.json"))
HISTORY_PATH = Path(os.getenv("WOTD_HISTORY_PATH", DATA_DIR / "history.json"))

RUN_AT = os.getenv("WOTD_RUN_AT", "00:01")     # UTC, daily
SCHEDULER_ENABLED = os.getenv("WOTD_SCHEDULER", "1") not in ("0", "false", "no")
LOG_LEVEL = os.getenv("WOTD_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)


# ───────── Store dependencies ─────────
def get_stores(request: Request) -> Stores:
    return request.app.state.stores


def get_scheduler(request: Request) -> DailyScheduler:
    return request.app.state.scheduler


# ───────── App ─────────
def create_app(
    stores: Optional[Stores] = None,
    client: Optional[WordLookup] = None,
    schedule: bool = SCHEDULER_ENABLED,
) -> FastAPI:
    app = FastAPI(title="Word of the Day API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.state.stores = stores or Stores.at(WORDLIST_PATH, USED_WORDS_PATH, HISTORY_PATH)
    app.state.scheduler = DailyScheduler(app.state.stores, client or DictionaryClient(), run_at=RUN_AT)

    # ───────── Lifecycle ─────────
    @app.on_event("startup")
    async def on_startup():
        if schedule:
            # first tick runs immediately, covering the startup check
            app.state.scheduler.start()

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.scheduler.stop()

    @app.get("/healthz")
    async def healthz():
        return {"ok": True}

    # ───────── /api/history (dates, newest first) ─────────
    @app.get("/api/history", response_model=List[str])
    def history_dates(stores: Stores = Depends(get_stores)):
        try:
            return list_dates(stores.history)
        except (StoreError, OSError):
            logger.exception("could not load history")
            raise HTTPException(status_code=500, detail="Failed to load history.")

    # ───────── /api/words/{date} (the three records for one day) ─────────
    @app.get("/api/words/{date}", response_model=List[WordRecord], response_model_by_alias=True)
    def words_for_date(date: str, stores: Stores = Depends(get_stores)):
        try:
            return get_words(stores.history, date)
        except DateNotFound:
            raise HTTPException(status_code=404, detail="No words found for this date.")
        except (StoreError, OSError):
            logger.exception("could not load words for %s", date)
            raise HTTPException(status_code=500, detail="Failed to load words.")

    # ───────── /api/refresh (manual trigger; no-op once today exists) ─────────
    @app.post("/api/refresh", response_model=DailyRun, response_model_by_alias=True)
    async def refresh(scheduler: DailyScheduler = Depends(get_scheduler)):
        try:
            return await scheduler.run_once()
        except Exception as e:
            logger.exception("manual refresh failed")
            raise HTTPException(status_code=500, detail=f"Daily update failed: {e}")

    return app


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
app = create_app()

# For local running: uvicorn wotd.main:app --reload --port 3001
