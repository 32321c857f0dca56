from __future__ import annotations

import os
from dataclasses import dataclass, field

from typing_extensions import List, Optional

from .exceptions import ConfigurationError
from .snapshot import DEFINITION_FILE


def default_cache_dir() -> str:
    return os.path.join(
        os.environ.get("XDG_CACHE_HOME", os.path.join(os.path.expanduser("~"), ".cache")),
        "ontotraits",
    )


@dataclass
class GenerationConfig:
    """Inputs of one generation run."""

    schemas: List[str] = field(default_factory=list)
    """
    The schemas requested by the user.
    """
    namespace: Optional[str] = None
    """
    The Python package the generated traits and classes are imported from, e.g. 'myapp.schema'.
    """
    folder: Optional[str] = None
    """
    The target folder for generated classes and traits.
    """
    version: str = "latest"
    remove_old: bool = False
    """
    Whether to remove old files before re-generating.
    """
    cache_dir: str = field(default_factory=default_cache_dir)
    source: Optional[str] = None
    """
    A local snapshot file used instead of downloading one.
    """
    url_pattern: str = DEFINITION_FILE

    def __post_init__(self):
        self.schemas = [s.strip() for s in self.schemas if s and s.strip()]

    def validate(self) -> GenerationConfig:
        """
        :raises ConfigurationError: If schemas, namespace or folder are missing.
        """
        missing = []
        if not self.schemas:
            missing.append("schemas")
        if not self.namespace:
            missing.append("namespace")
        if not self.folder:
            missing.append("folder")
        if missing:
            raise ConfigurationError(missing)
        return self
