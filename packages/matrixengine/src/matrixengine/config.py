"""
Engine Configuration
====================
Numeric tolerances and iteration caps used by the algorithms.
Single source of truth. These are fixed limits, not tuning knobs:
no public operation accepts them as arguments.

Usage:
    from matrixengine import config
    tol = config.get('tolerance.singular')
"""

CONFIG = {

    # =================================================================
    # Zero tests
    # =================================================================
    'tolerance': {
        'singular': 1e-10,           # |det| below this → Singular
        'rank_pivot': 1e-10,         # |x| must exceed this to be a pivot
        'qr_norm': 1e-10,            # Gram-Schmidt column left zero below this
        'eigen_convergence': 1e-10,  # off-diagonal absolute sum
    },

    # =================================================================
    # Unshifted QR iteration
    # =================================================================
    'eigen': {
        'max_iterations': 100,
    },

    # =================================================================
    # Presentation helpers
    # =================================================================
    'display': {
        'precision': 3,
    },
    'random': {
        'decimals': 2,
    },
}


def get(path: str, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('tolerance.singular')      → 1e-10
        get('eigen.max_iterations')    → 100
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val
