import threading
from typing import Optional

from appmeta.domain.entities import ApplicationStore

_store: Optional[ApplicationStore] = None
_store_lock = threading.Lock()


def get_store() -> ApplicationStore:
    global _store
    if _store is None:
        _store = ApplicationStore()
    return _store


def get_store_lock() -> threading.Lock:
    """Lock that request handlers hold around every store call."""
    return _store_lock
