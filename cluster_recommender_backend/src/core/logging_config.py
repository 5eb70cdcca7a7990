"""Root logger setup for the service process."""
from __future__ import annotations

import logging
import threading

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False
_lock = threading.Lock()


def setup_logging(level: str = "INFO") -> bool:
    """Configure the root logger on the first call only.

    Returns True if this call configured logging, False if it was already done.
    """
    global _configured
    with _lock:
        if _configured:
            return False
        root = logging.getLogger()
        if not root.handlers:
            logging.basicConfig(format=LOG_FORMAT)
        root.setLevel(level.upper())
        _configured = True
        return True
