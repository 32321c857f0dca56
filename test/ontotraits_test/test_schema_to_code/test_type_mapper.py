import pytest

from ontotraits.schema_to_code.type_mapper import TypeMapper


@pytest.mark.parametrize(
    "type_name, expected",
    [
        ("URL", "str"),
        ("Text", "str"),
        ("Date", "str"),
        ("DateTime", "str"),
        ("Time", "str"),
        ("Boolean", "bool"),
        ("True", "bool"),
        ("False", "bool"),
    ],
)
def test_primitive_types(type_name, expected):
    mapper = TypeMapper()

    assert mapper.translate(type_name) == (expected, True)
    assert mapper.suggestions == set()


def test_integer_and_number_are_distinct_numeric_types():
    mapper = TypeMapper()

    assert mapper.translate("Integer") == ("int", True)
    assert mapper.translate("Number") == ("float", True)


def test_unknown_type_is_kept_and_suggested_once():
    mapper = TypeMapper()

    assert mapper.translate("Person") == ("Person", False)
    assert mapper.translate("Person") == ("Person", False)
    assert mapper.translate("") == ("", False)

    assert mapper.suggestions == {"Person", ""}


def test_translation_is_stable_across_calls():
    mapper = TypeMapper()
    first = [mapper.translate(t) for t in ("Text", "Rating", "Number")]
    second = [mapper.translate(t) for t in ("Text", "Rating", "Number")]

    assert first == second
    assert mapper.suggestions == {"Rating"}


def test_overrides_extend_primitives():
    mapper = TypeMapper(overrides={"Float": "float", "Text": "bytes"})

    assert mapper.translate("Float") == ("float", True)
    # built in mappings win over overrides
    assert mapper.translate("Text") == ("str", True)
    assert "Float" not in mapper.suggestions


def test_suggestions_are_never_removed():
    suggestions = {"Place"}
    mapper = TypeMapper(suggestions=suggestions)

    mapper.translate("Text")
    mapper.translate("Person")

    assert suggestions == {"Place", "Person"}
