from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class BeanwireError(Exception):
    """Represent a base class for all beanwire-specific failures.

    Catch this type when you want to handle any beanwire error path without
    matching each concrete exception class individually.
    """


class InvalidBeanDefinitionError(BeanwireError):
    """Signal a malformed bean definition.

    Raised when a ``BeanDefinition`` is built with an empty name or a
    non-string name, and during resolution when explicit ``depends_on`` names
    do not line up with the constructor parameters of the bean type.
    """


class DuplicateBeanNameError(BeanwireError):
    """Signal that the catalog declares the same bean name more than once.

    Raised only by ``Container.list_bean_definitions``. Resolution never
    checks uniqueness.
    """

    def __init__(self, duplicates: Sequence[str]) -> None:
        self.duplicates = tuple(duplicates)
        names = ", ".join(f"'{name}'" for name in self.duplicates)
        super().__init__(f"Bean definitions are not unique: {names} declared more than once.")


class UnknownBeanError(BeanwireError, LookupError):
    """Signal that a bean name has no catalog entry.

    Raised for the requested name as well as for any dependency name derived
    from a constructor parameter. Typical fixes include adding the missing
    definition to the catalog or renaming the parameter's type so that the
    derived bean name matches an existing definition.
    """

    def __init__(self, bean_name: str) -> None:
        self.bean_name = bean_name
        super().__init__(f"No bean named '{bean_name}' is defined.")


class AmbiguousConstructorError(BeanwireError):
    """Signal that a bean type does not expose exactly one constructor shape.

    Zero shapes means the bean type is not a concrete, inspectable class.
    More than one shape means ``__init__`` or ``__new__`` declares several
    ``@overload`` signatures.
    """

    def __init__(self, bean_type: Any, constructor_count: int) -> None:
        self.bean_type = bean_type
        self.constructor_count = constructor_count
        type_name = getattr(bean_type, "__qualname__", repr(bean_type))
        super().__init__(
            f"Bean type '{type_name}' must expose exactly one constructor, "
            f"found {constructor_count}.",
        )


class TypeMismatchError(BeanwireError, TypeError):
    """Signal that a bean instance does not satisfy the requested type.

    Raised when a cached bean is no longer an instance of the type the catalog
    declares for its name, and by the typed ``get_bean`` accessor when the
    resolved bean is not an instance of ``expected_type``.
    """

    def __init__(self, bean_name: str, expected_type: Any, actual_type: type[Any]) -> None:
        self.bean_name = bean_name
        self.expected_type = expected_type
        self.actual_type = actual_type
        expected_name = getattr(expected_type, "__qualname__", repr(expected_type))
        super().__init__(
            f"Bean '{bean_name}' is of type '{actual_type.__qualname__}', "
            f"expected '{expected_name}'.",
        )


class CircularDependencyError(BeanwireError):
    """Signal a dependency cycle between beans.

    ``chain`` lists bean names from the first occurrence of the repeated name
    to its second occurrence, for example ``("a", "b", "a")``.
    """

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(f"Circular dependency detected: {' -> '.join(self.chain)}.")


class DependencyInferenceError(BeanwireError):
    """Signal that a required constructor parameter has no usable annotation.

    Typical fixes include annotating the parameter with the dependency's
    class, giving it a default value, or declaring ``depends_on`` on the bean
    definition.
    """

    def __init__(self, bean_type: type[Any], parameter_name: str) -> None:
        self.bean_type = bean_type
        self.parameter_name = parameter_name
        super().__init__(
            f"Unable to infer a bean name for required parameter '{parameter_name}' "
            f"of '{bean_type.__qualname__}'. Add a type annotation or declare depends_on.",
        )
