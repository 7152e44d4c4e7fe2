# wotd/dictionary_client.py
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from .schema import NO_DEFINITION, NO_EXAMPLE, WordRecord

API_BASE = os.getenv("DICTIONARY_API_BASE", "https://api.dictionaryapi.dev/api/v2/entries/en")
API_TIMEOUT = float(os.getenv("DICTIONARY_API_TIMEOUT", "10"))
HEADERS = {"accept": "application/json"}

logger = logging.getLogger(__name__)


def _first_str(*vals) -> Optional[str]:
    for v in vals:
        if isinstance(v, str) and v.strip():
            return v.strip()
    return None


def _dicts(v: Any) -> List[Dict[str, Any]]:
    return [x for x in v if isinstance(x, dict)] if isinstance(v, list) else []


def _head(v: Any) -> Dict[str, Any]:
    return v[0] if isinstance(v, list) and v and isinstance(v[0], dict) else {}


def _strings(v: Any) -> List[str]:
    return [x for x in v if isinstance(x, str)] if isinstance(v, list) else []


def normalize_entry(entry: Dict[str, Any], word: str) -> WordRecord:
    """Flatten one dictionaryapi.dev entry into a WordRecord."""
    phonetics = _dicts(entry.get("phonetics"))
    first_meaning = _head(entry.get("meanings"))
    definitions = _dicts(first_meaning.get("definitions"))

    pronunciation = _first_str(entry.get("phonetic"), *(p.get("text") for p in phonetics)) or ""
    audio = _first_str(*(p.get("audio") for p in phonetics)) or ""
    meaning = _first_str(_head(first_meaning.get("definitions")).get("definition")) or NO_DEFINITION
    example = _first_str(*(d.get("example") for d in definitions)) or NO_EXAMPLE

    return WordRecord(
        word=_first_str(entry.get("word")) or word,
        pronunciation=pronunciation,
        audio_url=audio,
        meaning=meaning,
        example=example,
        synonyms=_strings(first_meaning.get("synonyms")),
        antonyms=_strings(first_meaning.get("antonyms")),
    )


class DictionaryClient:
    def __init__(self, base_url: str = API_BASE, timeout: float = API_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _get_json(self, word: str) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.get(f"{self.base_url}/{quote(word)}", headers=HEADERS)
            r.raise_for_status()
            return r.json()

    async def get_word_details(self, word: str) -> Optional[WordRecord]:
        """Look up `word`; any failure is logged and reported as None."""
        try:
            data = await self._get_json(word)
        except httpx.HTTPStatusError as e:
            logger.info("no entry for %r (HTTP %s)", word, e.response.status_code)
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("lookup failed for %r: %s", word, e)
            return None

        if not (isinstance(data, list) and data and isinstance(data[0], dict)):
            logger.warning("unexpected response shape for %r", word)
            return None
        return normalize_entry(data[0], word)
