from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from beanwire.exceptions import CircularDependencyError

# Context variable for resolution tracking (each thread starts with an empty stack).
# Entries are (owner id, bean name) so nested containers do not see each other's names.
_resolution_stack: ContextVar[tuple[tuple[int, str], ...]] = ContextVar(
    "beanwire_resolution_stack",
    default=(),
)


@contextmanager
def resolution_frame(owner: object, name: str) -> Iterator[None]:
    """Mark ``name`` as being created by ``owner`` for the duration of the block.

    Raises ``CircularDependencyError`` before the block runs when ``owner`` is
    already creating ``name`` further up the current call stack.

    Args:
        owner: Container performing the resolution.
        name: Bean name about to be created.

    """
    stack = _resolution_stack.get()
    frame = (id(owner), name)
    if frame in stack:
        start = stack.index(frame)
        names = [
            frame_name for frame_owner, frame_name in stack[start:] if frame_owner == id(owner)
        ]
        raise CircularDependencyError([*names, name])

    token = _resolution_stack.set((*stack, frame))
    try:
        yield
    finally:
        _resolution_stack.reset(token)


__all__ = ["resolution_frame"]
