"""Recent search queries, newest first, persisted under their own blob key."""
import json
import logging
from typing import List

from travel_journal.core.blob_store import BlobStore
from travel_journal.core.exceptions import BlobStoreError

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class RecentSearches:
    def __init__(self, blob_store: BlobStore, key: str = "recent_searches", limit: int = DEFAULT_LIMIT):
        self.blob_store = blob_store
        self.key = key
        self.limit = limit
        self._items = self._load()

    def _load(self) -> List[str]:
        try:
            data = self.blob_store.load(self.key)
        except BlobStoreError as e:
            logger.warning("Could not read recent searches: %s", e.message)
            return []
        if data is None:
            return []
        try:
            items = json.loads(data)
        except ValueError:
            logger.warning("Recent searches blob is corrupt, ignoring it")
            return []
        if not isinstance(items, list):
            return []
        return [s for s in items if isinstance(s, str)][: self.limit]

    def _save(self) -> bool:
        try:
            self.blob_store.save(self.key, json.dumps(self._items).encode("utf-8"))
            return True
        except BlobStoreError as e:
            logger.warning("Could not persist recent searches: %s", e.message)
            return False

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def add(self, query: str) -> List[str]:
        """Record a query. Blank and already-present queries are ignored."""
        query = (query or "").strip()
        if query and query not in self._items:
            self._items.insert(0, query)
            del self._items[self.limit:]
            self._save()
        return self.items

    def clear(self) -> None:
        self._items = []
        self._save()
