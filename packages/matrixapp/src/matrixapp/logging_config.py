"""
Logging Configuration
Sets up the 'matrixengine' and 'matrixapp' loggers for command-line use.
Library code only creates module loggers; handlers are attached here.
"""
import logging
import sys

NAMESPACES = ('matrixengine', 'matrixapp')


def setup_logging(level: int = logging.INFO) -> None:
    """
    Attach a stderr handler to both package loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    # Format: Time - Module - Level - Message
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))

    for namespace in NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        # Avoid duplicate output when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.addHandler(handler)

    logging.getLogger('matrixapp').debug("Logging initialized.")
