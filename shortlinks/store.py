from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """String values scoped to ``(entity_type, entity_id, key)``."""

    @abstractmethod
    def get(self, entity_type: str, entity_id: int, key: str) -> Optional[str]:
        """Return the stored value, or None when nothing is stored."""

    @abstractmethod
    def set(self, entity_type: str, entity_id: int, key: str, value: str) -> None:
        pass

    @abstractmethod
    def delete(self, entity_type: str, entity_id: int, key: str) -> None:
        pass

    @abstractmethod
    def delete_all(self, entity_type: str, key: str) -> int:
        """Remove ``key`` from every entity; return how many values went away."""


class MetadataStore(KeyValueStore):
    """The site's metadata table."""

    def get(self, entity_type, entity_id, key):
        from pages.meta import get_metadata
        return get_metadata(entity_type, entity_id, key)

    def set(self, entity_type, entity_id, key, value):
        from pages.meta import update_metadata
        update_metadata(entity_type, entity_id, key, value)

    def delete(self, entity_type, entity_id, key):
        from pages.meta import delete_metadata
        delete_metadata(entity_type, entity_id, key)

    def delete_all(self, entity_type, key):
        from pages.meta import delete_metadata
        return len(delete_metadata(entity_type, None, key, delete_all=True))


class InMemoryStore(KeyValueStore):

    def __init__(self):
        self._data = {}

    def get(self, entity_type, entity_id, key):
        return self._data.get((entity_type, entity_id, key))

    def set(self, entity_type, entity_id, key, value):
        self._data[(entity_type, entity_id, key)] = value

    def delete(self, entity_type, entity_id, key):
        self._data.pop((entity_type, entity_id, key), None)

    def delete_all(self, entity_type, key):
        doomed = [k for k in self._data if k[0] == entity_type and k[2] == key]
        for k in doomed:
            del self._data[k]
        return len(doomed)

    def __len__(self):
        return len(self._data)
