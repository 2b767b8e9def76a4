from __future__ import annotations

import logging
import threading
from collections import Counter
from contextlib import AbstractContextManager, nullcontext
from typing import Any, TypeVar, overload

from beanwire._internal.constructors import ConstructorInspector
from beanwire._internal.planner import CreationPlanner
from beanwire._internal.resolution_stack import resolution_frame
from beanwire._internal.type_checks import is_runtime_class
from beanwire.catalog import BeanCatalog, BeanDefinition
from beanwire.exceptions import (
    DuplicateBeanNameError,
    TypeMismatchError,
    UnknownBeanError,
)
from beanwire.lock_mode import LockMode

T = TypeVar("T")

logger = logging.getLogger(__name__)
_MISSING = object()


class Container:
    """Create beans from a catalog and keep one instance per bean name.

    The container asks its catalog which class backs a bean name, builds the
    class through its single constructor, and resolves every constructor
    parameter as another bean. Parameter annotations are mapped to bean names
    by lowercasing the first character of the class name, so a parameter typed
    ``UserRepository`` is satisfied by the bean ``"userRepository"``.

    Every bean is a singleton for the lifetime of the container. The instance
    pool only grows: entries are never replaced or removed.

    Examples:
        .. code-block:: python

            catalog = StaticBeanCatalog.from_mapping(
                {
                    "userRepository": UserRepository,
                    "userService": UserService,
                },
            )
            container = Container(catalog)
            service = container.get_bean("userService", UserService)

    """

    def __init__(self, catalog: BeanCatalog, *, lock_mode: LockMode = LockMode.THREAD) -> None:
        """Bind a container to its catalog.

        Args:
            catalog: Source of bean names and definitions. The container keeps
                a reference and reads it on every call, so later catalog
                changes are observed.
            lock_mode: ``LockMode.THREAD`` guards first creation of each bean
                with a per-name lock. ``LockMode.NONE`` skips locking for
                single-threaded use.

        """
        self._catalog = catalog
        self._lock_mode = lock_mode

        self._pool: dict[str, Any] = {}
        self._guard = threading.Lock()
        self._creation_locks: dict[str, threading.Lock] = {}
        self._inspector = ConstructorInspector()
        self._planner = CreationPlanner(
            definition_of=self._definition_of,
            is_created=self.contains_bean,
            inspector=self._inspector,
        )

    def list_bean_definitions(self) -> list[str]:
        """Return the catalog's bean names after checking they are unique.

        Names keep the catalog's order. The instance pool is not touched.

        Raises:
            DuplicateBeanNameError: A name appears more than once in the catalog.

        """
        names = list(self._catalog.names())
        if len(set(names)) != len(names):
            duplicates = [name for name, count in Counter(names).items() if count > 1]
            raise DuplicateBeanNameError(duplicates)
        return names

    @overload
    def get_bean(self, name: str) -> Any: ...

    @overload
    def get_bean(self, name: str, expected_type: type[T]) -> T: ...

    def get_bean(self, name: str, expected_type: type[Any] | None = None) -> Any:
        """Return the bean called ``name``, creating it and its dependencies on first use.

        A cached bean is returned only while it is still an instance of the
        type the catalog declares for ``name``. On a miss the dependency graph
        is checked first, then dependencies are created depth-first in
        constructor parameter order and cached before the requesting bean.

        Args:
            name: Bean name to resolve.
            expected_type: Optional class the bean must be an instance of. Values
                that do not support ``isinstance`` checks, such as ``list[int]``,
                are reported as a mismatch.

        Raises:
            UnknownBeanError: ``name`` or a derived dependency name is not in the catalog.
            AmbiguousConstructorError: A bean type does not expose exactly one constructor.
            TypeMismatchError: The bean is not an instance of the declared or expected type.
            CircularDependencyError: The dependency graph contains a cycle.
            DependencyInferenceError: A required constructor parameter is not annotated.

        """
        if not self.contains_bean(name):
            plan = self._planner.plan(name)
            logger.debug("Creating bean '%s' with plan %s", name, plan.creation_order)

        instance = self._resolve(name)
        if expected_type is not None:
            _check_expected_type(name, instance, expected_type)
        return instance

    def contains_bean(self, name: str) -> bool:
        """Return whether the bean called ``name`` has already been created.

        Args:
            name: Bean name to look up in the instance pool.

        """
        with self._guard:
            return name in self._pool

    def bean_names(self) -> list[str]:
        """Return the names of created beans in creation order."""
        with self._guard:
            return list(self._pool)

    def _resolve(self, name: str) -> Any:
        definition = self._definition_of(name)
        instance = self._cached(name, definition)
        if instance is not _MISSING:
            logger.debug("Bean '%s' served from the instance pool", name)
            return instance

        with resolution_frame(self, name), self._creation_lock(name):
            instance = self._cached(name, definition)
            if instance is not _MISSING:
                return instance

            constructor = self._inspector.inspect(definition)
            values = [self._resolve(dependency) for dependency in constructor.dependency_names]
            instance = constructor.invoke(values)
            with self._guard:
                self._pool[name] = instance

        logger.debug(
            "Created bean '%s' of type %s",
            name,
            definition.bean_type.__qualname__,
        )
        return instance

    def _cached(self, name: str, definition: BeanDefinition) -> Any:
        with self._guard:
            instance = self._pool.get(name, _MISSING)
        if instance is _MISSING:
            return _MISSING
        bean_type = definition.bean_type
        if not is_runtime_class(bean_type) or not isinstance(instance, bean_type):
            raise TypeMismatchError(name, bean_type, type(instance))
        return instance

    def _definition_of(self, name: str) -> BeanDefinition:
        definition = self._catalog.definition_of(name)
        if definition is None:
            raise UnknownBeanError(name)
        return definition

    def _creation_lock(self, name: str) -> AbstractContextManager[Any]:
        if self._lock_mode is LockMode.NONE:
            return nullcontext()
        with self._guard:
            lock = self._creation_locks.get(name)
            if lock is None:
                lock = self._creation_locks[name] = threading.Lock()
        return lock

    def __repr__(self) -> str:
        return f"{type(self).__name__}(catalog={self._catalog!r}, beans={self.bean_names()!r})"


def _check_expected_type(name: str, instance: object, expected_type: Any) -> None:
    # Parameterized generics and non-runtime-checkable protocols cannot be checked.
    if not is_runtime_class(expected_type):
        raise TypeMismatchError(name, expected_type, type(instance))
    try:
        matches = isinstance(instance, expected_type)
    except TypeError as error:
        raise TypeMismatchError(name, expected_type, type(instance)) from error
    if not matches:
        raise TypeMismatchError(name, expected_type, type(instance))


__all__ = ["Container"]
