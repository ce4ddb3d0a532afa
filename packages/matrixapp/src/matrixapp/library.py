"""
Named-matrix library.

Holds the user's saved matrices by name and writes every change through
to an injected MatrixStore. Matrices go in and come out as clones, so a
matrix being edited is never the stored one.

Usage:
    from matrixapp.library import MatrixLibrary
    from matrixapp.store import MemoryStore

    lib = MatrixLibrary(MemoryStore())
    lib.save('A', Matrix(2, 2, [[4, 7], [2, 6]]))
    a = lib.get('A')          # independent copy
    lib.rename('A', 'B')
"""

import logging
from typing import Any, Dict, List

from matrixengine import Matrix, MatrixError

from matrixapp.store import MatrixStore

logger = logging.getLogger(__name__)


def _validate_name(name: str):
    if not name or not name.strip():
        raise ValueError("Matrix name must not be empty")


class MatrixLibrary:
    """
    Name → Matrix mapping persisted through a MatrixStore.

    Parameters
    ----------
    store : MatrixStore
        Backing store. Every record it lists is loaded on construction;
        records that cannot be turned back into a Matrix are logged and
        skipped.
    """

    def __init__(self, store: MatrixStore):
        self._store = store
        self._matrices: Dict[str, Matrix] = {}
        self._load()

    def _load(self):
        for name in self._store.list():
            try:
                self._matrices[name] = Matrix.from_record(self._store.load(name))
            except (KeyError, TypeError, ValueError, MatrixError):
                logger.exception(f"Skipping unreadable stored matrix {name!r}")
        logger.debug(f"Loaded {len(self._matrices)} matrices from store")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def names(self) -> List[str]:
        return list(self._matrices.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._matrices

    def __len__(self) -> int:
        return len(self._matrices)

    def get(self, name: str) -> Matrix:
        """Independent copy of the stored matrix. KeyError if unknown."""
        if name not in self._matrices:
            raise KeyError(f"Unknown matrix: {name!r}. Available: {self.names()}")
        return self._matrices[name].clone()

    def describe(self) -> List[Dict[str, Any]]:
        """One {'name', 'rows', 'cols'} entry per saved matrix, in save order."""
        return [
            {'name': name, 'rows': m.rows, 'cols': m.cols}
            for name, m in self._matrices.items()
        ]

    # ------------------------------------------------------------------
    # Mutations (each one persisted immediately)
    # ------------------------------------------------------------------

    def save(self, name: str, matrix: Matrix):
        """Store a copy of matrix under name, replacing any previous one."""
        _validate_name(name)
        stored = matrix.clone()
        self._store.save(name, stored.to_record())
        self._matrices[name] = stored
        logger.info(f"Saved matrix {name!r} ({stored.rows}x{stored.cols})")

    def delete(self, name: str):
        if name not in self._matrices:
            raise KeyError(f"Unknown matrix: {name!r}")
        self._store.delete(name)
        del self._matrices[name]
        logger.info(f"Deleted matrix {name!r}")

    def rename(self, old_name: str, new_name: str):
        """
        Move a matrix to a new name.

        Raises
        ------
        ValueError
            new_name is blank, or names another existing matrix.
        KeyError
            old_name is unknown.
        """
        _validate_name(new_name)
        if old_name not in self._matrices:
            raise KeyError(f"Unknown matrix: {old_name!r}")
        if new_name == old_name:
            return
        if new_name in self._matrices:
            raise ValueError(f"A matrix named {new_name!r} already exists")

        matrix = self._matrices[old_name]
        self._store.save(new_name, matrix.to_record())
        self._store.delete(old_name)
        self._matrices[new_name] = self._matrices.pop(old_name)
        logger.info(f"Renamed matrix {old_name!r} → {new_name!r}")
