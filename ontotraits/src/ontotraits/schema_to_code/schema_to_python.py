"""
This module provides the high level entry points that convert a schema.org style ontology into Python
traits and classes: the resolution pipeline and the converter that loads, renders and saves.
"""

from __future__ import annotations

from typing_extensions import Dict, Iterable, List, Optional

from .closure import ClosureResolver
from .code_generator import ArtifactWriter, CodeGenerator
from .graph_index import GraphIndex
from .model_assembler import ModelAssembler
from .property_collector import PropertyCollector
from .schema_info import GenerationResult, ResolutionContext, SchemaEntry
from .snapshot_reader import SnapshotReader
from .type_mapper import TypeMapper
from .. import logger
from ..config import GenerationConfig
from ..snapshot import SnapshotFetcher


def resolve_schemas(
    entries: Iterable[SchemaEntry],
    schemas: Iterable[str],
    type_mapper: Optional[TypeMapper] = None,
) -> GenerationResult:
    """
    Run the core of the generator: index, closure, property collection and assembly.

    :param entries: The flattened ontology entries.
    :param schemas: The classes requested by the user, in order.
    :param type_mapper: The range translator, a fresh one is used if not given.
    :return: The class models of every required class and the sorted suggestions.
    """
    context = ResolutionContext(GraphIndex(entries))
    ClosureResolver.resolve_all(context, schemas)
    PropertyCollector(type_mapper).collect(context)
    return ModelAssembler.assemble(context)


class SchemaToPythonConverter:
    """High-level converter for transforming an ontology snapshot into Python traits and classes."""

    def __init__(
        self,
        config: GenerationConfig,
        fetcher: Optional[SnapshotFetcher] = None,
        reader: Optional[SnapshotReader] = None,
        type_overrides: Optional[Dict[str, str]] = None,
    ):
        """
        :param config: The inputs of the run, validated before anything else happens.
        :param fetcher: Downloads the snapshot when no local source is configured.
        :param reader: Parses the snapshot.
        :param type_overrides: Additional primitive type mappings.
        """
        self.config = config.validate()
        self.fetcher = fetcher or SnapshotFetcher(
            config.cache_dir, url_pattern=config.url_pattern
        )
        self.reader = reader or SnapshotReader()
        self.type_overrides = type_overrides
        self.entries: List[SchemaEntry] = []
        self.result: Optional[GenerationResult] = None

    def load_ontology(self) -> List[SchemaEntry]:
        """
        Load the configured local snapshot or the cached/downloaded one of the configured version.
        """
        path = self.config.source or self.fetcher.fetch(self.config.version)
        self.entries = self.reader.read(path)
        logger.debug(f"[schema_to_python]: {len(self.entries)} ontology entries loaded")
        return self.entries

    def resolve(self) -> GenerationResult:
        if not self.entries:
            self.load_ontology()
        self.result = resolve_schemas(
            self.entries,
            self.config.schemas,
            TypeMapper(overrides=self.type_overrides),
        )
        return self.result

    def generate_python_code_external(self) -> Dict[str, str]:
        """
        Generate Python code without saving to disk.
        :return: Dictionary of relative file path to content.
        """
        result = self.result or self.resolve()
        return CodeGenerator(result, self.config.namespace).generate()

    def save_to_folder(self) -> List[str]:
        """
        Generate the trait and class modules and write them to the configured folder.
        :return: The written paths.
        """
        files = self.generate_python_code_external()
        writer = ArtifactWriter(self.config.folder)
        writer.prepare(self.config.remove_old)
        for cls in self.result.classes:
            logger.info(f"[T] Generating {self.config.namespace}.traits.{cls.trait_name}")
        for name in self.result.requested:
            logger.info(f"[C] Generating {self.config.namespace}.{self.result.by_name[name].class_name}")
        return writer.write(files)
