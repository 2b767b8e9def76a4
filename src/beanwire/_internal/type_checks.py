from __future__ import annotations

import inspect
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_constructible_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a concrete class that can be instantiated.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return is_runtime_class(candidate) and not inspect.isabstract(candidate)


__all__ = ["is_constructible_class", "is_runtime_class"]
