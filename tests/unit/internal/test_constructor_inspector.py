from abc import ABC, abstractmethod
from inspect import Parameter
from typing import overload

import pytest

from beanwire._internal.constructors import ConstructorInspector
from beanwire.catalog import BeanDefinition
from beanwire.exceptions import (
    AmbiguousConstructorError,
    DependencyInferenceError,
    InvalidBeanDefinitionError,
)


class Repository:
    pass


class Clock:
    pass


DEFAULT_REPOSITORY = Repository()


class Service:
    def __init__(self, repository: Repository, clock: "Clock") -> None:
        self.repository = repository
        self.clock = clock


class WithUnresolvableHint:
    def __init__(self, repository: Repository, missing: "MissingType") -> None:  # noqa: F821
        self.repository = repository


class OverloadedNew:
    @overload
    def __new__(cls, value: int) -> "OverloadedNew": ...

    @overload
    def __new__(cls, value: str) -> "OverloadedNew": ...

    def __new__(cls, value: object) -> "OverloadedNew":
        return super().__new__(cls)

    def __init__(self, value: object) -> None:
        self.value = value


class SingleOverload:
    @overload
    def __init__(self, repository: Repository) -> None: ...

    def __init__(self, repository: Repository) -> None:
        self.repository = repository


class AbstractBean(ABC):
    @abstractmethod
    def run(self) -> None: ...


class UnionParameter:
    def __init__(self, value: int | str) -> None:
        self.value = value


class UnresolvedGenericHint:
    def __init__(self, ghosts: "list[Ghost]") -> None:  # noqa: F821
        self.ghosts = ghosts


class OptionalRepository:
    def __init__(self, repository: Repository | None = None) -> None:
        self.repository = repository


def make_service() -> Service:
    return Service(Repository(), Clock())


@pytest.fixture()
def inspector() -> ConstructorInspector:
    return ConstructorInspector()


class TestConstructorCount:
    def test_plain_class_has_one_constructor(self, inspector: ConstructorInspector) -> None:
        assert inspector.constructor_count(Repository) == 1

    def test_overloaded_new_counts_each_overload(self, inspector: ConstructorInspector) -> None:
        assert inspector.constructor_count(OverloadedNew) == 2

    def test_single_overload_is_one_constructor(self, inspector: ConstructorInspector) -> None:
        assert inspector.constructor_count(SingleOverload) == 1

    @pytest.mark.parametrize("bean_type", [AbstractBean, make_service, "Service", list[int]])
    def test_non_constructible_types_have_none(
        self,
        inspector: ConstructorInspector,
        bean_type: object,
    ) -> None:
        assert inspector.constructor_count(bean_type) == 0

    def test_inspect_rejects_abstract_class(self, inspector: ConstructorInspector) -> None:
        with pytest.raises(AmbiguousConstructorError) as exc_info:
            inspector.inspect(BeanDefinition("abstractBean", AbstractBean))

        assert exc_info.value.constructor_count == 0


class TestInferredDependencies:
    def test_maps_annotations_to_bean_names(self, inspector: ConstructorInspector) -> None:
        constructor = inspector.inspect(BeanDefinition("service", Service))

        assert constructor.dependency_names == ("repository", "clock")
        assert [d.parameter.name for d in constructor.dependencies] == ["repository", "clock"]

    def test_falls_back_to_annotation_text(self, inspector: ConstructorInspector) -> None:
        constructor = inspector.inspect(BeanDefinition("bean", WithUnresolvableHint))

        assert constructor.dependency_names == ("repository", "missingType")

    def test_union_annotation_cannot_be_named(self, inspector: ConstructorInspector) -> None:
        with pytest.raises(DependencyInferenceError) as exc_info:
            inspector.inspect(BeanDefinition("bean", UnionParameter))

        assert exc_info.value.parameter_name == "value"

    def test_optional_annotation_cannot_be_named(self, inspector: ConstructorInspector) -> None:
        with pytest.raises(DependencyInferenceError):
            inspector.inspect(BeanDefinition("bean", OptionalRepository))

    def test_unresolved_generic_text_cannot_be_named(self, inspector: ConstructorInspector) -> None:
        with pytest.raises(DependencyInferenceError) as exc_info:
            inspector.inspect(BeanDefinition("bean", UnresolvedGenericHint))

        assert exc_info.value.parameter_name == "ghosts"

    def test_results_are_cached_per_type(self, inspector: ConstructorInspector) -> None:
        first = inspector.inspect(BeanDefinition("service", Service))
        second = inspector.inspect(BeanDefinition("otherName", Service))

        assert first is second


class TestExplicitDependencies:
    def test_binds_names_in_parameter_order(self, inspector: ConstructorInspector) -> None:
        definition = BeanDefinition("service", Service, depends_on=("primaryRepo", "utcClock"))

        constructor = inspector.inspect(definition)

        assert constructor.dependency_names == ("primaryRepo", "utcClock")
        assert constructor.dependencies[1].parameter.name == "clock"

    def test_may_omit_parameters_with_defaults(self, inspector: ConstructorInspector) -> None:
        definition = BeanDefinition("bean", OptionalRepository, depends_on=())

        assert inspector.inspect(definition).dependencies == ()

    @pytest.mark.parametrize("depends_on", [("one",), ("one", "two", "three")])
    def test_count_must_fit_parameters(
        self,
        inspector: ConstructorInspector,
        depends_on: tuple[str, ...],
    ) -> None:
        with pytest.raises(InvalidBeanDefinitionError, match="declares"):
            inspector.inspect(BeanDefinition("service", Service, depends_on=depends_on))


class TestInvoke:
    def test_passes_keyword_arguments(self, inspector: ConstructorInspector) -> None:
        constructor = inspector.inspect(BeanDefinition("service", Service))
        repository, clock = Repository(), Clock()

        service = constructor.invoke([repository, clock])

        assert service.repository is repository
        assert service.clock is clock

    def test_skipped_positional_only_parameter_keeps_default(self) -> None:
        class PositionalDefaults:
            def __init__(self, first=1, second: Repository = DEFAULT_REPOSITORY, /) -> None:  # noqa: ANN001
                self.first = first
                self.second = second

        constructor = ConstructorInspector().inspect(BeanDefinition("bean", PositionalDefaults))
        repository = Repository()

        bean = constructor.invoke([repository])

        assert constructor.dependency_names == ("repository",)
        assert constructor.parameters[0].kind is Parameter.POSITIONAL_ONLY
        assert bean.first == 1
        assert bean.second is repository
