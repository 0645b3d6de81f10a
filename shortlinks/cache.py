import logging
from typing import Optional

from .store import KeyValueStore

logger = logging.getLogger(__name__)

ENTITY_TYPE = 'post'
META_KEY = '_tinyurl_shortlink'


class ShortlinkCache:
    """One shortlink per page, kept until a change to the page invalidates it."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get(self, page_id: int) -> Optional[str]:
        value = self.store.get(ENTITY_TYPE, page_id, META_KEY)
        return value or None

    def set(self, page_id: int, value: str) -> None:
        if not value:
            raise ValueError("Refusing to cache an empty shortlink")
        self.store.set(ENTITY_TYPE, page_id, META_KEY, value)

    def invalidate(self, page_id: int) -> None:
        self.store.delete(ENTITY_TYPE, page_id, META_KEY)
        logger.debug(f"Shortlink cache cleared for page {page_id}")

    def invalidate_all(self) -> int:
        removed = self.store.delete_all(ENTITY_TYPE, META_KEY)
        logger.info(f"Shortlink cache cleared for {removed} pages")
        return removed
