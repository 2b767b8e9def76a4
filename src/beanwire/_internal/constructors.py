from __future__ import annotations

import inspect
from collections.abc import Sequence
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, get_type_hints

from typing_extensions import get_overloads

from beanwire._internal.type_checks import is_constructible_class
from beanwire.catalog import BeanDefinition
from beanwire.exceptions import (
    AmbiguousConstructorError,
    DependencyInferenceError,
    InvalidBeanDefinitionError,
)
from beanwire.naming import bean_name_for

_MISSING_ANNOTATION = object()
_CONSTRUCTOR_MEMBER_NAMES = ("__init__", "__new__")


@dataclass(frozen=True, slots=True)
class BeanDependency:
    """Represent a dependency bean name bound to a constructor parameter."""

    bean_name: str
    parameter: Parameter


@dataclass(frozen=True, slots=True)
class BeanConstructor:
    """The single constructor shape of a bean type and its dependencies."""

    bean_type: type[Any]
    parameters: tuple[Parameter, ...]
    dependencies: tuple[BeanDependency, ...]

    @property
    def dependency_names(self) -> tuple[str, ...]:
        return tuple(dependency.bean_name for dependency in self.dependencies)

    def invoke(self, values: Sequence[Any]) -> Any:
        """Call the bean type with ``values`` bound to the dependency parameters.

        Positional-only parameters are passed positionally, all others by
        keyword. A skipped positional-only parameter receives its default so
        later positional arguments keep their place.

        Args:
            values: Resolved dependency instances, in dependency order.

        """
        values_by_name = {
            dependency.parameter.name: value
            for dependency, value in zip(self.dependencies, values, strict=True)
        }
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in self.parameters:
            if parameter.name in values_by_name:
                if parameter.kind is Parameter.POSITIONAL_ONLY:
                    args.append(values_by_name[parameter.name])
                else:
                    kwargs[parameter.name] = values_by_name[parameter.name]
            elif parameter.kind is Parameter.POSITIONAL_ONLY:
                args.append(parameter.default)
        return self.bean_type(*args, **kwargs)


class ConstructorInspector:
    """Find the constructor of a bean type and match its parameters to bean names."""

    def __init__(self) -> None:
        self._cache: dict[tuple[type[Any], tuple[str, ...] | None], BeanConstructor] = {}

    def inspect(self, definition: BeanDefinition) -> BeanConstructor:
        """Return the constructor shape for ``definition``.

        Args:
            definition: Bean definition whose type is inspected.

        Raises:
            AmbiguousConstructorError: The type exposes zero or several constructors.
            DependencyInferenceError: A required parameter has no annotation.
            InvalidBeanDefinitionError: ``depends_on`` does not fit the parameters.

        """
        cache_key = (definition.bean_type, definition.depends_on)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        bean_type = definition.bean_type
        parameters = self._constructor_parameters(bean_type)
        if definition.depends_on is None:
            dependencies = self._infer_dependencies(bean_type, parameters)
        else:
            dependencies = self._explicit_dependencies(definition, parameters)

        constructor = BeanConstructor(
            bean_type=bean_type,
            parameters=parameters,
            dependencies=dependencies,
        )
        self._cache[cache_key] = constructor
        return constructor

    def constructor_count(self, bean_type: Any) -> int:
        """Count the constructor shapes ``bean_type`` exposes.

        Args:
            bean_type: Candidate bean type.

        """
        if not is_constructible_class(bean_type):
            return 0
        try:
            inspect.signature(bean_type)
        except (TypeError, ValueError):
            return 0

        count = 1
        for member_name in _CONSTRUCTOR_MEMBER_NAMES:
            member = inspect.getattr_static(bean_type, member_name, None)
            if isinstance(member, staticmethod | classmethod):
                member = member.__func__
            if inspect.isfunction(member):
                count = max(count, len(get_overloads(member)))
        return count

    def _constructor_parameters(self, bean_type: Any) -> tuple[Parameter, ...]:
        count = self.constructor_count(bean_type)
        if count != 1:
            raise AmbiguousConstructorError(bean_type, count)
        return tuple(inspect.signature(bean_type).parameters.values())

    def _infer_dependencies(
        self,
        bean_type: type[Any],
        parameters: tuple[Parameter, ...],
    ) -> tuple[BeanDependency, ...]:
        annotations = self._resolved_type_hints(bean_type)
        dependencies: list[BeanDependency] = []

        for parameter in self._injectable_parameters(parameters):
            annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
            if annotation is _MISSING_ANNOTATION and parameter.annotation is not Parameter.empty:
                annotation = parameter.annotation
            if annotation is _MISSING_ANNOTATION:
                if parameter.default is Parameter.empty:
                    raise DependencyInferenceError(bean_type, parameter.name)
                continue

            try:
                bean_name = bean_name_for(annotation)
            except TypeError as error:
                raise DependencyInferenceError(bean_type, parameter.name) from error
            dependencies.append(BeanDependency(bean_name=bean_name, parameter=parameter))

        return tuple(dependencies)

    def _explicit_dependencies(
        self,
        definition: BeanDefinition,
        parameters: tuple[Parameter, ...],
    ) -> tuple[BeanDependency, ...]:
        depends_on = definition.depends_on or ()
        injectable = self._injectable_parameters(parameters)
        required_count = sum(1 for parameter in injectable if parameter.default is Parameter.empty)
        if not required_count <= len(depends_on) <= len(injectable):
            msg = (
                f"Bean '{definition.name}' declares {len(depends_on)} dependencies but "
                f"'{definition.bean_type.__qualname__}' takes between {required_count} and "
                f"{len(injectable)} injectable parameters."
            )
            raise InvalidBeanDefinitionError(msg)

        return tuple(
            BeanDependency(bean_name=bean_name, parameter=parameter)
            for bean_name, parameter in zip(depends_on, injectable, strict=False)
        )

    def _injectable_parameters(self, parameters: tuple[Parameter, ...]) -> tuple[Parameter, ...]:
        return tuple(
            parameter
            for parameter in parameters
            if parameter.kind is not Parameter.VAR_POSITIONAL
            and parameter.kind is not Parameter.VAR_KEYWORD
        )

    def _resolved_type_hints(self, bean_type: type[Any]) -> dict[str, Any]:
        # Unresolvable forward references fall back to the raw annotation text.
        merged: dict[str, Any] = {}
        for member_name in _CONSTRUCTOR_MEMBER_NAMES:
            member = getattr(bean_type, member_name)
            try:
                member_annotations = get_type_hints(member)
            except (AttributeError, NameError, TypeError):
                continue
            for parameter_name, annotation in member_annotations.items():
                if parameter_name != "return":
                    merged.setdefault(parameter_name, annotation)
        return merged


__all__ = ["BeanConstructor", "BeanDependency", "ConstructorInspector"]
