"""In-memory store mixin providing the shared map and its lock.

Responsibilities:
    - Own the process-local dict backing a DAO
    - Own the single lock serializing every access to it

Classes:
    - InMemoryStoreMixin: Base mixin to inject a lock-guarded dict into a DAO.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLMemoryDAO(InMemoryStoreMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLMemoryDAO()
        >>> with dao.lock:
        ...     dao.records['abc123'] = model
"""

import threading
from typing import Any


class InMemoryStoreMixin:
    """Mixin providing a lock-guarded dict for in-memory DAOs.

    Attributes:
        records (dict[str, Any]):
            Backing dict. Subclasses must only touch it while holding `lock`
            and must never hand it out to callers.

        lock (threading.Lock):
            Mutual-exclusion lock guarding `records`.

    NOTE:
        - Critical sections are a single dict operation. No I/O or shortcode
          generation happens while the lock is held.
    """

    def __init__(self):
        self.records: dict[str, Any] = {}
        self.lock = threading.Lock()

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
