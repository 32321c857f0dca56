import os

import pytest

from .dataset.entries import book_ontology, diamond_ontology

DATASET_DIR = os.path.join(os.path.dirname(__file__), "dataset")


@pytest.fixture
def jsonld_snapshot():
    return os.path.join(DATASET_DIR, "mini_schemaorg.jsonld")


@pytest.fixture
def turtle_snapshot():
    return os.path.join(DATASET_DIR, "mini_schemaorg.ttl")


@pytest.fixture
def book_entries():
    return book_ontology()


@pytest.fixture
def diamond_entries():
    return diamond_ontology()
