"""
Matrix CLI
==========

Run one engine operation on matrices given as JSON row lists.

    python -m matrixapp list
    python -m matrixapp run determinant --a '[[4, 7], [2, 6]]'
    python -m matrixapp run multiply --a '[[1, 2], [3, 4]]' --b '[[5, 6], [7, 8]]'
    python -m matrixapp run scalar_multiply --a '[[1, 2]]' --scalar 2.5
    python -m matrixapp run eigenvalues --a '[[2, 1], [1, 2]]' --log-level DEBUG

Results are printed as JSON: a matrix as its {'rows', 'cols', 'data'}
record, a number as a number, eigenvalues as a list.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from matrixengine import Matrix, MatrixError

from matrixapp.logging_config import setup_logging
from matrixapp.registry import get_registry


def parse_matrix(text: str) -> Matrix:
    """'[[1, 2], [3, 4]]' → Matrix. Rows must all have the same length."""
    rows = json.loads(text)
    if not isinstance(rows, list) or not rows or not isinstance(rows[0], list):
        raise ValueError(f"Expected a JSON list of rows, got {text!r}")
    return Matrix(len(rows), len(rows[0]), rows)


def _to_json(result: Any) -> Any:
    if isinstance(result, Matrix):
        return result.to_record()
    return result


def _build_parser() -> argparse.ArgumentParser:
    levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

    # --log-level is accepted before or after the subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--log-level', choices=levels, default=argparse.SUPPRESS)

    parser = argparse.ArgumentParser(
        prog='matrixapp',
        description='Matrix engine operations from the command line',
    )
    parser.add_argument('--log-level', choices=levels, default='WARNING')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('list', parents=[common], help='List available operations')

    run = sub.add_parser('run', parents=[common], help='Run one operation')
    run.add_argument('operation')
    run.add_argument('--a', required=True, help='First matrix as JSON rows')
    run.add_argument('--b', help='Second matrix as JSON rows (binary operations)')
    run.add_argument('--scalar', type=float, help='Scalar (scalar_multiply)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))
    registry = get_registry()

    if args.command == 'list':
        for op in registry.list_operations():
            print(f"{op['name']:<16} {op['arity']:<7} {op['description']}")
        return 0

    try:
        a = parse_matrix(args.a)
        b = parse_matrix(args.b) if args.b is not None else None
        result = registry.run(args.operation, a, b, scalar=args.scalar)
    except (MatrixError, KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(_to_json(result)))
    return 0
