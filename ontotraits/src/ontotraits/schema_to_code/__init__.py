from .closure import ClosureResolver, trait_chain
from .graph_index import GraphIndex
from .model_assembler import ModelAssembler
from .property_collector import PropertyCollector
from .schema_info import (
    ClassModel,
    EntryKind,
    GenerationResult,
    PropertyDefinition,
    ResolutionContext,
    SchemaEntry,
)
from .schema_to_python import SchemaToPythonConverter, resolve_schemas
from .type_mapper import TypeMapper
