"""Errors: every failure names the bean and leaves the container untouched."""

from __future__ import annotations

from beanwire import (
    BeanwireError,
    CircularDependencyError,
    Container,
    StaticBeanCatalog,
    UnknownBeanError,
)


class Chicken:
    def __init__(self, egg: Egg) -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


class Nest:
    def __init__(self, straw: Straw) -> None:  # noqa: F821
        self.straw = straw


def main() -> None:
    catalog = StaticBeanCatalog.from_mapping({"chicken": Chicken, "egg": Egg, "nest": Nest})
    container = Container(catalog)

    try:
        container.get_bean("chicken")
    except CircularDependencyError as error:
        print(f"cycle={' -> '.join(error.chain)}")  # => cycle=chicken -> egg -> chicken

    try:
        container.get_bean("nest")
    except UnknownBeanError as error:
        print(f"unknown={error.bean_name}")  # => unknown=straw

    try:
        container.get_bean("dragon")
    except BeanwireError as error:
        print(f"error={error}")  # => error=No bean named 'dragon' is defined.

    print(f"created={container.bean_names()}")  # => created=[]


if __name__ == "__main__":
    main()
