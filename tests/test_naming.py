from typing import ForwardRef, Optional

import pytest

from beanwire.naming import bean_name_for, decapitalize


class TestBean:
    __test__ = False


class HTTPClient:
    pass


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("TestBean", "testBean"),
        ("testBean", "testBean"),
        ("HTTPClient", "hTTPClient"),
        ("X", "x"),
        ("", ""),
    ],
)
def test_decapitalize(name: str, expected: str) -> None:
    assert decapitalize(name) == expected


def test_class_uses_bare_name() -> None:
    assert bean_name_for(TestBean) == "testBean"
    assert bean_name_for(HTTPClient) == "hTTPClient"


def test_string_annotation_uses_last_segment() -> None:
    assert bean_name_for("TestBean") == "testBean"
    assert bean_name_for("repositories.UserRepository") == "userRepository"


def test_forward_ref_uses_argument() -> None:
    assert bean_name_for(ForwardRef("UserRepository")) == "userRepository"


def test_parameterized_generic_uses_origin() -> None:
    assert bean_name_for(list[int]) == "list"


def test_union_has_no_bean_name() -> None:
    with pytest.raises(TypeError, match="Cannot derive a bean name"):
        bean_name_for(Optional[TestBean])  # noqa: UP007


@pytest.mark.parametrize("annotation", ["Optional[Ghost]", "list[Ghost]", "Ghost | None"])
def test_unevaluated_generic_text_has_no_bean_name(annotation: str) -> None:
    with pytest.raises(TypeError, match="Cannot derive a bean name"):
        bean_name_for(annotation)
