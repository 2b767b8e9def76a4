"""Naming convention that maps a dependency's type to a bean name."""

from __future__ import annotations

import types
from typing import Any, ForwardRef, Union, get_origin

from beanwire._internal.type_checks import is_runtime_class


def decapitalize(name: str) -> str:
    """Lowercase the first character of ``name``.

    Examples:
        .. code-block:: python

            decapitalize("TestBean")  # "testBean"
            decapitalize("URLCache")  # "uRLCache"

    """
    if not name:
        return name
    return name[0].lower() + name[1:]


def bean_name_for(annotation: Any) -> str:
    """Derive the bean name a parameter annotated with ``annotation`` resolves to.

    Classes use their bare ``__name__``. String annotations and forward
    references that could not be evaluated use the text after the last dot,
    so ``"models.UserRepository"`` maps to ``"userRepository"``. Parameterized
    generics use their origin class.

    Args:
        annotation: Parameter annotation, either a class or an unevaluated reference.

    Raises:
        TypeError: The annotation does not name a class (for example a union,
            or unevaluated text such as ``"Optional[Ghost]"``).

    """
    if is_runtime_class(annotation):
        return decapitalize(annotation.__name__)
    if isinstance(annotation, ForwardRef):
        annotation = annotation.__forward_arg__
    if isinstance(annotation, str):
        if "[" in annotation or "|" in annotation:
            msg = f"Cannot derive a bean name from annotation {annotation!r}."
            raise TypeError(msg)
        return decapitalize(annotation.strip().strip("'\"").rsplit(".", 1)[-1])
    origin = get_origin(annotation)
    if origin is not Union and origin is not types.UnionType and is_runtime_class(origin):
        return decapitalize(origin.__name__)
    msg = f"Cannot derive a bean name from annotation {annotation!r}."
    raise TypeError(msg)
