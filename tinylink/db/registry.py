import logging
import threading
from dataclasses import replace
from typing import Dict, Optional

from tinylink.db.models import ShortLink

logger = logging.getLogger(__name__)


class Registry:
    """In-memory store of short code -> ShortLink.

    Every operation takes the same lock, so check-and-insert and click
    increments are atomic with respect to concurrent requests. Callers only
    ever see copies of the stored links.
    """

    def __init__(self):
        self._links: Dict[str, ShortLink] = {}
        self._lock = threading.Lock()

    def exists(self, short_code: str) -> bool:
        with self._lock:
            return short_code in self._links

    def save(self, short_code: str, original_url: str) -> bool:
        # Overwrites an existing entry; the create flow uses save_if_absent.
        with self._lock:
            self._links[short_code] = ShortLink(short_code=short_code, original_url=original_url)
        logger.debug("Saved %s -> %s", short_code, original_url[:50])
        return True

    def save_if_absent(self, short_code: str, original_url: str) -> Optional[ShortLink]:
        with self._lock:
            if short_code in self._links:
                return None
            link = ShortLink(short_code=short_code, original_url=original_url)
            self._links[short_code] = link
            return replace(link)

    def get(self, short_code: str) -> Optional[ShortLink]:
        with self._lock:
            link = self._links.get(short_code)
            return replace(link) if link else None

    def increment_clicks(self, short_code: str) -> Optional[ShortLink]:
        with self._lock:
            link = self._links.get(short_code)
            if link is None:
                return None
            link.click_count += 1
            return replace(link)

    def count(self) -> int:
        with self._lock:
            return len(self._links)

