import pytest
from schema_builders import COLUMN, INTEGER, STRING, collection, scalar, subcomponent

from arg_schema_to_code.pipeline.analyzer import ShapeKind, classify
from arg_schema_to_code.pipeline.errors import SchemaClassificationError
from arg_schema_to_code.pipeline.schema_ast import ArgumentSchema, SchemaKind


@pytest.mark.parametrize(
    "argument, expected",
    [
        (scalar("count"), ShapeKind.SCALAR),
        (scalar("flag", SchemaKind.BOOLEAN), ShapeKind.SCALAR),
        (collection("cols", COLUMN), ShapeKind.COLUMN_COLLECTION),
        (collection("names", STRING), ShapeKind.STRING_COLLECTION),
        (collection("bins", INTEGER), ShapeKind.GENERIC_COLLECTION),
        (subcomponent("sub", "SubArguments", [scalar("x")]), ShapeKind.SUBCOMPONENT_GROUP),
    ],
    ids=["int", "bool", "column", "string", "generic", "subcomponent"],
)
def test_classify(argument, expected):
    assert classify(argument) == expected


def test_column_item_wins_over_string_sequence_field():
    """A column collection is a column collection whatever its declared field type."""
    argument = collection("cols", COLUMN, field_type=collection("x", STRING).field_type)
    assert classify(argument) == ShapeKind.COLUMN_COLLECTION


def test_string_field_on_scalar_is_scalar():
    """Collection-ness is decided by the flag, not by the field type alone."""
    argument = ArgumentSchema(long_name="names", item_type=STRING, field_type=collection("x", STRING).field_type)
    assert classify(argument) == ShapeKind.SCALAR


def test_classification_is_pure():
    argument = collection("cols", COLUMN)
    assert {classify(argument) for _ in range(3)} == {ShapeKind.COLUMN_COLLECTION}


def test_collection_without_item_type_is_rejected():
    argument = ArgumentSchema(long_name="broken", is_collection=True)
    with pytest.raises(SchemaClassificationError) as exc_info:
        classify(argument)
    assert exc_info.value.argument == "broken"
    assert "broken" in str(exc_info.value)


def test_scalar_without_type_is_rejected():
    with pytest.raises(SchemaClassificationError):
        classify(ArgumentSchema(long_name="untyped"))


def test_subcomponent_collection_is_rejected():
    argument = ArgumentSchema(
        long_name="subs",
        field_type=INTEGER,
        is_collection=True,
        nested=(scalar("x"),),
    )
    with pytest.raises(SchemaClassificationError):
        classify(argument)


@pytest.mark.parametrize("name", ["Count", "_count", "2d", ""])
def test_name_without_distinct_property_is_rejected(name):
    with pytest.raises(SchemaClassificationError) as exc_info:
        classify(scalar(name))
    assert exc_info.value.argument == name


def test_subcomponent_name_is_not_capitalized():
    """Only member arguments get a property; a group name only ends up in suffixes."""
    assert classify(subcomponent("Sub", "SubArguments", [scalar("x")])) == ShapeKind.SUBCOMPONENT_GROUP
