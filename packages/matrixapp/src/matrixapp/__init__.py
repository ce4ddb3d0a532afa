"""
Host-side collaborators for the matrix engine.

The engine computes; this package holds what a front end needs around it:

1. A named-matrix library persisted through an injected store
   (save / get / delete / rename, written through on every change).

2. An operation registry that dispatches engine operations by name,
   with their labels, arity and size caps declared in YAML.

3. A small command-line front end (`python -m matrixapp`).

No rendering and no storage medium live here. Front ends render the
results; stores decide where records go.
"""

from matrixapp.store import MatrixStore, MemoryStore
from matrixapp.library import MatrixLibrary
from matrixapp.registry import (
    OperationSpec,
    Registry,
    SizeLimitExceeded,
    get_registry,
)

__all__ = [
    'MatrixStore',
    'MemoryStore',
    'MatrixLibrary',
    'OperationSpec',
    'Registry',
    'SizeLimitExceeded',
    'get_registry',
]
