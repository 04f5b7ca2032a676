import sys

from loguru import logger

LOG_FORMAT = '<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>'

_configured_level = None


def configure_logging(level='INFO'):
    """
    Route loguru output to stderr with a compact format.
    Calling it again with the same level is a no-op (Streamlit reruns the page script).
    """
    global _configured_level
    if _configured_level == level:
        return
    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True, format=LOG_FORMAT)
    _configured_level = level
