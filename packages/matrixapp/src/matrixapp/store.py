"""
Persistence interface for named matrices.

The library never touches a storage medium directly. It is handed a
MatrixStore and writes through it on every mutation. Records are the
plain {'rows', 'cols', 'data'} dicts produced by Matrix.to_record().
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, List

Record = Dict[str, Any]


class MatrixStore(ABC):
    """Name → record persistence."""

    @abstractmethod
    def save(self, name: str, record: Record) -> None:
        pass

    @abstractmethod
    def load(self, name: str) -> Record:
        """Return the record stored under name. KeyError if absent."""
        pass

    @abstractmethod
    def list(self) -> List[str]:
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove name. KeyError if absent."""
        pass


class MemoryStore(MatrixStore):
    """
    Dict-backed store.

    Records are deep-copied in both directions so neither side can
    mutate the other's nested row lists.
    """

    def __init__(self, records: Dict[str, Record] = None):
        self._records: Dict[str, Record] = {}
        for name, record in (records or {}).items():
            self.save(name, record)

    def save(self, name: str, record: Record) -> None:
        self._records[name] = copy.deepcopy(record)

    def load(self, name: str) -> Record:
        if name not in self._records:
            raise KeyError(f"No stored matrix named {name!r}")
        return copy.deepcopy(self._records[name])

    def list(self) -> List[str]:
        return list(self._records.keys())

    def delete(self, name: str) -> None:
        if name not in self._records:
            raise KeyError(f"No stored matrix named {name!r}")
        del self._records[name]

    def __len__(self) -> int:
        return len(self._records)
