import pytest

from ontotraits.config import GenerationConfig
from ontotraits.exceptions import ConfigurationError


def test_defaults():
    config = GenerationConfig(schemas=["Book"], namespace="gen", folder="out")

    assert config.validate() is config
    assert config.version == "latest"
    assert config.remove_old is False
    assert config.cache_dir.endswith("ontotraits")


def test_blank_schemas_are_dropped():
    config = GenerationConfig(schemas=[" Book ", "", "  "], namespace="gen", folder="out")

    assert config.schemas == ["Book"]


def test_all_missing_options_are_reported():
    with pytest.raises(ConfigurationError) as e:
        GenerationConfig().validate()

    assert e.value.missing == ["schemas", "namespace", "folder"]
    assert isinstance(e.value, ValueError)
    assert "schemas, namespace, folder" in str(e.value)
