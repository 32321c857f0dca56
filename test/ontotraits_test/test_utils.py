from ontotraits.utils import NamingRegistry, strip_markup, wrap_list


def test_wrap_list():
    assert wrap_list(None) == []
    assert wrap_list("a") == ["a"]
    assert wrap_list(("a", "b")) == ["a", "b"]
    assert wrap_list({"@id": "x"}) == [{"@id": "x"}]


def test_strip_markup():
    assert strip_markup(None) == ""
    assert strip_markup(" A <a href=\"x\">link</a><br/> ") == "A link"


def test_strip_namespace():
    assert NamingRegistry.strip_namespace("http://schema.org/Book") == "Book"
    assert NamingRegistry.strip_namespace("https://schema.org/Book") == "Book"
    assert NamingRegistry.strip_namespace("schema:Book") == "Book"
    assert NamingRegistry.strip_namespace("rdfs:Class") == "rdfs:Class"
    assert NamingRegistry.strip_namespace(None) == ""


def test_python_names():
    assert NamingRegistry.module_name("CreativeWork") == "creative_work"
    assert NamingRegistry.module_name("3DModel") == "_3_d_model"
    assert NamingRegistry.class_name("3DModel") == "_3DModel"
    assert NamingRegistry.class_name("True") == "True_"
    assert NamingRegistry.field_name("isPartOf") == "is_part_of"
    assert NamingRegistry.field_name("from") == "from_"
