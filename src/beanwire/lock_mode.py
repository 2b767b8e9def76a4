from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for bean creation.

    Pass one of these values as ``Container(..., lock_mode=...)``. Thread
    locking is the default and keeps the singleton guarantee when several
    threads request the same bean for the first time.
    """

    THREAD = "thread"
    """Guard each bean name with its own ``threading.Lock`` during creation."""

    NONE = "none"
    """Disable locking around pool reads/writes for single-threaded use."""
