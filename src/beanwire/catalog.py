from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from beanwire.exceptions import InvalidBeanDefinitionError, UnknownBeanError


@dataclass(frozen=True, slots=True)
class BeanDefinition:
    """Pair a bean name with the class the container instantiates for it.

    ``depends_on`` optionally names the dependency beans explicitly, one per
    injectable constructor parameter in declaration order. When omitted, the
    container derives each name from the parameter's annotation.

    Examples:
        .. code-block:: python

            BeanDefinition("userService", UserService)
            BeanDefinition("reportService", ReportService, depends_on=("readOnlyDb",))

    """

    name: str
    bean_type: type[Any]
    depends_on: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Bean name must be a non-empty string, got {self.name!r}."
            raise InvalidBeanDefinitionError(msg)
        if self.depends_on is not None:
            depends_on = tuple(self.depends_on)
            if not all(isinstance(name, str) and name for name in depends_on):
                msg = f"depends_on of bean '{self.name}' must contain non-empty strings."
                raise InvalidBeanDefinitionError(msg)
            object.__setattr__(self, "depends_on", depends_on)


@runtime_checkable
class BeanCatalog(Protocol):
    """Declarative source of bean names and their definitions.

    Implementations return names in a caller-significant order and may return
    ``None`` or raise ``UnknownBeanError`` from ``definition_of`` for names
    they do not know.
    """

    def names(self) -> Sequence[str]: ...

    def definition_of(self, name: str) -> BeanDefinition | None: ...


class StaticBeanCatalog:
    """In-memory catalog built from bean definitions.

    Duplicate names are kept as declared so ``Container.list_bean_definitions``
    can report them. Lookups by name return the last definition for a name.
    """

    def __init__(self, definitions: Iterable[BeanDefinition] = ()) -> None:
        self._definitions: list[BeanDefinition] = list(definitions)

    @classmethod
    def from_mapping(cls, bean_types: Mapping[str, type[Any]]) -> StaticBeanCatalog:
        """Build a catalog from a ``{bean_name: bean_type}`` mapping.

        Args:
            bean_types: Bean classes keyed by bean name, in catalog order.

        """
        return cls(BeanDefinition(name, bean_type) for name, bean_type in bean_types.items())

    def define(
        self,
        name: str,
        bean_type: type[Any],
        *,
        depends_on: Sequence[str] | None = None,
    ) -> BeanDefinition:
        """Add a definition, or replace the one ``definition_of`` returns for ``name``.

        Args:
            name: Bean name to define.
            bean_type: Class instantiated for the bean.
            depends_on: Optional explicit dependency bean names.

        """
        definition = BeanDefinition(
            name,
            bean_type,
            depends_on=tuple(depends_on) if depends_on is not None else None,
        )
        for index in range(len(self._definitions) - 1, -1, -1):
            if self._definitions[index].name == name:
                self._definitions[index] = definition
                return definition
        self._definitions.append(definition)
        return definition

    def names(self) -> list[str]:
        return [definition.name for definition in self._definitions]

    def definition_of(self, name: str) -> BeanDefinition:
        for definition in reversed(self._definitions):
            if definition.name == name:
                return definition
        raise UnknownBeanError(name)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names()!r})"
