"""Tests for builder construction and check declaration."""

import pytest

from multiassert import MultiAssertBuilder
from multiassert.assertions import AssertionKind
from multiassert.catalog import FieldCatalog
from multiassert.errors import (
    ConfigurationError,
    EmptyPathError,
    MalformedPathError,
    MissingActualError,
    MissingExpectedError,
    TypeMismatchError,
)
from tests.models import make_dog


# --- construction ---


def test_actual_is_required(bob2):
    with pytest.raises(MissingActualError, match="'actual' parameter is None"):
        MultiAssertBuilder(None, bob2)


def test_expected_must_have_same_type(bob1):
    with pytest.raises(TypeMismatchError, match="same type") as exc_info:
        MultiAssertBuilder(bob1, make_dog())
    assert exc_info.value.actual_type == "tests.models.Human"
    assert exc_info.value.expected_type == "tests.models.Dog"


def test_subclass_is_not_the_same_type(bob1):
    class Bobby(type(bob1)):
        pass

    other = Bobby.__new__(Bobby)
    with pytest.raises(TypeMismatchError):
        MultiAssertBuilder(bob1, other)


def test_construction_errors_are_value_errors():
    with pytest.raises(ValueError):
        MultiAssertBuilder(None)


def test_expected_is_optional(bob1):
    builder = MultiAssertBuilder(bob1)
    assert builder.expected is None
    assert builder.examined_type is type(bob1)


# --- field declarations ---


def test_names_are_split_into_fields_and_sub_fields(bob1, bob2):
    builder = MultiAssertBuilder(bob1, bob2).assert_equal_fields(
        "surname", "dog.name", "dog.age", "human_type"
    )
    spec = builder.spec
    assert list(spec.fields[AssertionKind.EQUALS]) == ["surname", "human_type"]
    assert {top: list(subs) for top, subs in spec.sub_fields[AssertionKind.EQUALS].items()} == {
        "dog": ["name", "age"]
    }


@pytest.mark.parametrize(
    ("method", "kind"),
    [
        ("assert_equal_fields", AssertionKind.EQUALS),
        ("assert_not_equal_fields", AssertionKind.NOT_EQUALS),
        ("assert_null_fields", AssertionKind.NULL),
        ("assert_not_null_fields", AssertionKind.NOT_NULL),
    ],
)
def test_each_declaration_method_targets_its_kind(bob1, bob2, method, kind):
    builder = MultiAssertBuilder(bob1, bob2)
    assert getattr(builder, method)("age", "dog.toy") is builder
    assert "age" in builder.spec.fields[kind]
    assert "toy" in builder.spec.sub_fields[kind]["dog"]
    others = [other for other in AssertionKind if other is not kind]
    assert all(not builder.spec.fields[other] for other in others)


def test_repeated_declarations_merge(bob1, bob2):
    builder = MultiAssertBuilder(bob1, bob2)
    builder.assert_not_equal_fields("name", "dog.name")
    builder.assert_not_equal_fields("address", "dog.age")
    assert list(builder.spec.fields[AssertionKind.NOT_EQUALS]) == ["name", "address"]
    assert list(builder.spec.sub_fields[AssertionKind.NOT_EQUALS]["dog"]) == ["name", "age"]


def test_duplicate_declarations_are_ignored(bob1, bob2):
    builder = MultiAssertBuilder(bob1, bob2)
    builder.assert_equal_fields("surname", "dog.name")
    builder.assert_equal_fields("surname", "dog.name", "surname")
    assert builder.spec.count() == 2


def test_declare_accepts_a_kind(bob1, bob2):
    builder = MultiAssertBuilder(bob1, bob2).declare(AssertionKind.NULL, "name")
    assert "name" in builder.spec.fields[AssertionKind.NULL]


def test_empty_declaration_is_allowed(bob1, bob2):
    builder = MultiAssertBuilder(bob1, bob2).assert_equal_fields()
    assert builder.spec.count() == 0


@pytest.mark.parametrize(
    "method",
    [
        "assert_equal_fields",
        "assert_not_equal_fields",
        "assert_null_fields",
        "assert_not_null_fields",
    ],
)
def test_field_declarations_require_expected(bob1, method):
    builder = MultiAssertBuilder(bob1, None)
    with pytest.raises(MissingExpectedError, match="'expected' parameter is None"):
        getattr(builder, method)("dog.toey")


def test_too_many_dots_fail_at_declaration(bob1, bob2):
    with pytest.raises(MalformedPathError, match="friend.dog.name"):
        MultiAssertBuilder(bob1, bob2).assert_equal_fields("friend.dog.name")


def test_malformed_name_rejects_the_whole_declaration(bob1, bob2):
    builder = MultiAssertBuilder(bob1, bob2).assert_equal_fields("age")
    with pytest.raises(MalformedPathError):
        builder.assert_equal_fields("surname", "dog.name", "friend.dog.name")
    assert builder.spec.count() == 1
    assert list(builder.spec.fields[AssertionKind.EQUALS]) == ["age"]
    assert builder.spec.sub_fields[AssertionKind.EQUALS] == {}


# --- value declarations ---


def test_values_go_to_equal_or_not_equal_maps(bob1):
    builder = (
        MultiAssertBuilder(bob1)
        .assert_value("age", 26)
        .assert_value("dog.name", "popo", equals=False)
        .assert_value("name", None, True)
    )
    assert builder.spec.equal_values == {"age": 26, "name": None}
    assert builder.spec.not_equal_values == {"dog.name": "popo"}


def test_value_declared_twice_keeps_last_value(bob1):
    builder = MultiAssertBuilder(bob1).assert_value("age", 1).assert_value("age", 26)
    assert builder.spec.equal_values == {"age": 26}


def test_same_path_can_be_checked_both_ways(bob1):
    builder = MultiAssertBuilder(bob1).assert_value("age", 26).assert_value("age", 3, False)
    assert builder.spec.count() == 2


@pytest.mark.parametrize("path", ["", None])
def test_value_path_must_not_be_empty(bob1, path):
    with pytest.raises(EmptyPathError, match="empty"):
        MultiAssertBuilder(bob1).assert_value(path, 26)


def test_value_path_with_too_many_dots(bob1):
    with pytest.raises(ConfigurationError):
        MultiAssertBuilder(bob1).assert_value("friend.dog.age", 5)


def test_top_level_names_cover_every_category(bob1, bob2):
    builder = (
        MultiAssertBuilder(bob1, bob2)
        .assert_null_fields("name")
        .assert_not_null_fields("friend.age")
        .assert_value("dog.age", 5)
        .assert_value("wannabe", None, equals=False)
    )
    assert builder.spec.top_level_names() == ["name", "friend", "dog", "wannabe"]


# --- collaborators ---


def test_catalog_can_be_shared(bob1, bob2):
    catalog = FieldCatalog()
    MultiAssertBuilder(bob1, bob2, catalog=catalog).assert_equal_fields("surname").run_assertions()
    assert type(bob1) in catalog
    builder = MultiAssertBuilder(bob2, bob1, catalog=catalog)
    assert builder.catalog is catalog
