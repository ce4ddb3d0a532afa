"""
Operation Registry
==================
Auto-discovers matrix operations from YAML configs in operation_configs/.
Each YAML declares: the Matrix method to call, its arity, what kind of
result it returns, a size cap, and display metadata.

Usage:
    from matrixapp.registry import get_registry
    reg = get_registry()
    reg.run('determinant', a)          # → 10.0
    reg.run('multiply', a, b)          # → Matrix
    reg.run('scalar_multiply', a, scalar=2.0)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from matrixengine import Matrix, MatrixError

from matrixapp.library import MatrixLibrary

logger = logging.getLogger(__name__)

ARITIES = ('unary', 'binary', 'scalar')
RESULT_KINDS = ('matrix', 'scalar', 'sequence')


class SizeLimitExceeded(MatrixError, ValueError):
    """An operand is larger than the operation's declared max_dimension."""


@dataclass
class OperationSpec:
    """Operation specification from YAML config."""
    name: str
    version: str
    method: str
    arity: str
    result: str
    max_dimension: int
    label: str
    description: str


class Registry:
    """
    Operation registry. Discovers operations from YAML configs.
    Lazily resolves the Matrix method on first use.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(__file__).parent / 'operation_configs'
        self._specs: Dict[str, OperationSpec] = {}
        self._compute_cache: Dict[str, Callable] = {}
        self._discover()

    def _discover(self):
        """Scan the config directory for YAML files."""
        if not self._config_dir.exists():
            return
        for path in sorted(self._config_dir.glob('*.yaml')):
            name = path.stem
            with open(path) as f:
                cfg = yaml.safe_load(f)
            if not isinstance(cfg, dict):
                raise ValueError(f"{path.name}: expected a mapping, got {type(cfg).__name__}")
            req = cfg.get('requirements', {})
            meta = cfg.get('metadata', {})
            spec = OperationSpec(
                name=name,
                version=str(cfg.get('version', '1.0')),
                method=cfg.get('method', name),
                arity=cfg.get('arity', 'unary'),
                result=cfg.get('result', 'matrix'),
                max_dimension=int(req.get('max_dimension', 10)),
                label=meta.get('label', name),
                description=meta.get('description', ''),
            )
            if spec.arity not in ARITIES:
                raise ValueError(f"{path.name}: unknown arity {spec.arity!r}, expected one of {ARITIES}")
            if spec.result not in RESULT_KINDS:
                raise ValueError(f"{path.name}: unknown result {spec.result!r}, expected one of {RESULT_KINDS}")
            if not callable(getattr(Matrix, spec.method, None)):
                raise ValueError(f"{path.name}: Matrix has no method {spec.method!r}")
            self._specs[name] = spec
        logger.debug(f"Discovered {len(self._specs)} operations in {self._config_dir}")

    @property
    def operation_names(self) -> List[str]:
        """All discovered operation names."""
        return list(self._specs.keys())

    def get_spec(self, name: str) -> OperationSpec:
        """Get operation specification."""
        if name not in self._specs:
            raise KeyError(f"Unknown operation: {name}. Available: {self.operation_names}")
        return self._specs[name]

    def get_compute(self, name: str) -> Callable:
        """
        Get the function behind an operation. Lazily resolved.
        Unary: f(a). Binary: f(a, b). Scalar: f(a, k).
        """
        if name in self._compute_cache:
            return self._compute_cache[name]

        spec = self.get_spec(name)
        func = getattr(Matrix, spec.method)
        self._compute_cache[name] = func
        return func

    def list_operations(self) -> List[Dict[str, Any]]:
        """Summary of every operation, for hosts building menus."""
        return [
            {
                'name': s.name,
                'label': s.label,
                'arity': s.arity,
                'result': s.result,
                'description': s.description,
            }
            for s in self._specs.values()
        ]

    def _check_size(self, spec: OperationSpec, operands: List[Matrix]):
        for m in operands:
            if m.rows > spec.max_dimension or m.cols > spec.max_dimension:
                raise SizeLimitExceeded(
                    f"{spec.label}: {m.rows}x{m.cols} exceeds the "
                    f"{spec.max_dimension}x{spec.max_dimension} limit"
                )

    def run(
        self,
        name: str,
        a: Matrix,
        b: Optional[Matrix] = None,
        scalar: Optional[float] = None,
    ) -> Any:
        """
        Run an operation on one or two matrices.

        Returns a Matrix, a number, or a list of numbers depending on the
        operation's declared result. Engine errors propagate unchanged.
        """
        spec = self.get_spec(name)

        operands = [a]
        if spec.arity == 'binary':
            if b is None:
                raise ValueError(f"{spec.label} needs a second matrix")
            operands.append(b)
        elif spec.arity == 'scalar' and scalar is None:
            raise ValueError(f"{spec.label} needs a scalar")

        self._check_size(spec, operands)
        func = self.get_compute(name)

        logger.debug(f"Running {name} on {[m.shape for m in operands]}")
        if spec.arity == 'binary':
            return func(a, b)
        if spec.arity == 'scalar':
            return func(a, scalar)
        return func(a)

    def run_named(
        self,
        name: str,
        library: MatrixLibrary,
        a_name: str,
        b_name: Optional[str] = None,
        scalar: Optional[float] = None,
    ) -> Any:
        """Run an operation on matrices looked up by name in a library."""
        a = library.get(a_name)
        b = library.get(b_name) if b_name is not None else None
        return self.run(name, a, b, scalar=scalar)


# Module-level singleton
_registry: Optional[Registry] = None


def get_registry() -> Registry:
    """Get or create the global operation registry."""
    global _registry
    if _registry is None:
        _registry = Registry()
    return _registry
