from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from beanwire._internal.constructors import ConstructorInspector
from beanwire.catalog import BeanDefinition
from beanwire.exceptions import CircularDependencyError


@dataclass(slots=True)
class CreationPlan:
    """Bean names that must be created for a request, dependencies first."""

    root: str
    creation_order: list[str] = field(default_factory=list)


class CreationPlanner:
    """Walk the dependency graph of a bean before any instance is created.

    The walk is depth-first in constructor parameter order and stops at names
    that are already instantiated. It rejects cycles, unknown names and bad
    constructors up front, so a failed request never leaves half a graph in
    the pool and creation locks are always taken in acyclic order.
    """

    def __init__(
        self,
        *,
        definition_of: Callable[[str], BeanDefinition],
        is_created: Callable[[str], bool],
        inspector: ConstructorInspector,
    ) -> None:
        self._definition_of = definition_of
        self._is_created = is_created
        self._inspector = inspector

    def plan(self, name: str) -> CreationPlan:
        plan = CreationPlan(root=name)
        self._visit(name, path=[], planned=set(), plan=plan)
        return plan

    def _visit(self, name: str, *, path: list[str], planned: set[str], plan: CreationPlan) -> None:
        if name in path:
            raise CircularDependencyError([*path[path.index(name) :], name])
        if name in planned or self._is_created(name):
            return

        definition = self._definition_of(name)
        constructor = self._inspector.inspect(definition)

        path.append(name)
        for dependency_name in constructor.dependency_names:
            self._visit(dependency_name, path=path, planned=planned, plan=plan)
        path.pop()

        planned.add(name)
        plan.creation_order.append(name)


__all__ = ["CreationPlan", "CreationPlanner"]
