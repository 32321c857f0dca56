import pytest

from ontotraits.exceptions import SchemaLookupError
from ontotraits.schema_to_code.closure import ClosureResolver, trait_chain
from ontotraits.schema_to_code.graph_index import GraphIndex
from ontotraits.schema_to_code.schema_info import ResolutionContext
from ..dataset.entries import class_entry


def resolve(entries, *names):
    context = ResolutionContext(GraphIndex(entries))
    return ClosureResolver.resolve_all(context, names)


def test_ancestors_in_discovery_order(book_entries):
    context = resolve(book_entries, "Book")

    assert list(context.required) == ["Book", "CreativeWork", "Thing"]
    assert context.requested == ["Book"]


def test_class_reachable_twice_is_required_once():
    entries = [class_entry("A"), class_entry("B", "A")]

    context = resolve(entries, "A", "B")

    assert list(context.required) == ["A", "B"]


def test_diamond_is_expanded_depth_first_once(diamond_entries):
    context = resolve(diamond_entries, "Both")

    assert list(context.required) == ["Both", "Left", "Thing", "Right"]


def test_closure_is_complete(diamond_entries):
    context = resolve(diamond_entries, "Both", "Left")
    index = context.index

    for name in context.required:
        for parent in index[name].sub_class_of:
            assert parent in context.required


def test_empty_and_repeated_requests_are_ignored(book_entries):
    context = resolve(book_entries, "", "Book", "Book")

    assert list(context.required) == ["Book", "CreativeWork", "Thing"]
    assert context.requested == ["Book"]


def test_cycle_terminates():
    entries = [class_entry("A", "B"), class_entry("B", "C"), class_entry("C", "A")]

    context = resolve(entries, "A")

    assert list(context.required) == ["A", "B", "C"]


def test_missing_ancestor_names_identifier_and_requester():
    entries = [class_entry("Thing", "Ghost"), class_entry("Book", "Thing")]

    with pytest.raises(SchemaLookupError) as e:
        resolve(entries, "Book")

    assert isinstance(e.value, LookupError)
    assert e.value.identifier == "Ghost"
    assert e.value.requested_by == "Thing"
    assert "Ghost" in str(e.value)


def test_missing_ancestor_aborts_before_later_requests():
    entries = [
        class_entry("Broken", "Ghost"),
        class_entry("Unrelated"),
    ]
    context = ResolutionContext(GraphIndex(entries))

    with pytest.raises(SchemaLookupError):
        ClosureResolver.resolve_all(context, ["Broken", "Unrelated"])

    assert "Unrelated" not in context.required


def test_missing_requested_class():
    with pytest.raises(SchemaLookupError) as e:
        resolve([class_entry("Thing")], "Movie")

    assert e.value.identifier == "Movie"
    assert e.value.requested_by is None


def test_trait_chain_is_duplicate_free(diamond_entries):
    index = GraphIndex(diamond_entries)

    assert trait_chain(index, "Both") == ["Both", "Left", "Thing", "Right"]
    assert trait_chain(index, "Thing") == ["Thing"]
