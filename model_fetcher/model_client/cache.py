"""
In-memory store for decoded league models.
"""
from typing import Dict, List, Optional


class ModelCache:
    """
    Unbounded league code -> model bytes mapping.

    Entries are never evicted or expired. Values are stored as immutable
    bytes so callers can share them without copying.
    """

    def __init__(self):
        self._store: Dict[str, bytes] = {}

    def get(self, league_code: str) -> Optional[bytes]:
        return self._store.get(league_code)

    def set(self, league_code: str, data: bytes) -> None:
        self._store[league_code] = bytes(data)

    def invalidate(self, league_code: str) -> bool:
        """Drop one entry so the next request re-downloads it."""
        return self._store.pop(league_code, None) is not None

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> List[str]:
        return list(self._store.keys())

    def __contains__(self, league_code: str) -> bool:
        return league_code in self._store

    def __len__(self) -> int:
        return len(self._store)
