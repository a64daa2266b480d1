import json
import logging
import time
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from faq_records import FaqRecord, coerce_records

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json"}


class FaqStoreError(RuntimeError):
    pass


def _is_url(source: str) -> bool:
    return urlparse(source).scheme in {"http", "https"}


def _rows_from_payload(payload: Any) -> list:
    # Some FAQ documents wrap the list: {"faqs": [...]}
    if isinstance(payload, dict):
        payload = payload.get("faqs", payload.get("items"))
    if not isinstance(payload, list):
        raise FaqStoreError("FAQ document is not a list of records.")
    return payload


class FaqStore:
    """Loads FAQ records from a JSON file or an http(s) URL.

    Any failure is logged and surfaces as an empty list, so callers always
    get something they can match against.
    """

    def __init__(
        self,
        source: str | Path,
        *,
        cache_ttl: float = 0.0,
        timeout: float = 10.0,
        max_retries: int = 3,
        backoff: float = 0.5,
        session: requests.Session | None = None,
    ):
        self.source = str(source)
        self.cache_ttl = cache_ttl
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.backoff = backoff
        self.session = session or requests.Session()
        self._cached: list[FaqRecord] | None = None
        self._cached_at = 0.0

    def _read_file(self) -> Any:
        path = Path(self.source)
        if not path.exists():
            raise FaqStoreError(f"FAQ file not found: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            raise FaqStoreError(f"Could not read FAQ file {path}: {err}") from err

    def _fetch_url(self) -> Any:
        last_err: FaqStoreError | None = None
        for attempt in range(1, self.max_retries + 1):
            # cache-bust so a fresh deploy is never hidden behind a stale copy
            params = {"_": str(int(time.time() * 1000))}
            try:
                resp = self.session.get(
                    self.source, params=params, headers=JSON_HEADERS, timeout=self.timeout
                )
                if resp.status_code == 429 or resp.status_code >= 500:
                    last_err = FaqStoreError(f"FAQ fetch error {resp.status_code}")
                    if attempt < self.max_retries:
                        logger.warning("FAQ fetch got %s, retrying (attempt %d)", resp.status_code, attempt)
                        time.sleep(self.backoff * attempt)
                        continue
                    raise last_err
                if resp.status_code >= 400:
                    raise FaqStoreError(f"FAQ fetch error {resp.status_code}")
                return resp.json()
            except requests.RequestException as e:
                last_err = FaqStoreError(f"FAQ fetch failed: {e}")
                if attempt < self.max_retries:
                    logger.warning("FAQ fetch failed (%s), retrying (attempt %d)", e, attempt)
                    time.sleep(self.backoff * attempt)
                    continue
                raise last_err from e
            except ValueError as e:
                raise FaqStoreError(f"FAQ response is not valid JSON: {e}") from e

        if last_err:
            raise last_err
        raise FaqStoreError("FAQ fetch failed unexpectedly.")

    def fetch(self) -> list[FaqRecord]:
        """Load and validate records, raising FaqStoreError on any failure."""
        payload = self._fetch_url() if _is_url(self.source) else self._read_file()
        rows = _rows_from_payload(payload)
        records = coerce_records(rows)
        dropped = len(rows) - len(records)
        if dropped:
            logger.debug("Dropped %d malformed FAQ rows from %s", dropped, self.source)
        return records

    def load(self) -> list[FaqRecord]:
        now = time.monotonic()
        if self._cached is not None and self.cache_ttl > 0 and now - self._cached_at < self.cache_ttl:
            return self._cached
        try:
            records = self.fetch()
        except FaqStoreError as err:
            logger.warning("FAQ source unavailable, matching against no records: %s", err)
            return []
        logger.debug("Loaded %d FAQ records from %s", len(records), self.source)
        self._cached = records
        self._cached_at = now
        return records
