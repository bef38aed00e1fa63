# Standard library imports
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the process.
    
    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    global _configured
    if _configured:
        return
    
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # Motor/pymongo are chatty at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    _configured = True
