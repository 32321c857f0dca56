"""
Data model shared by the stages that turn an ontology snapshot into trait and class models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ordered_set import OrderedSet
from typing_extensions import Dict, List, Set, Tuple, TYPE_CHECKING

from ..utils import NamingRegistry

if TYPE_CHECKING:
    from .graph_index import GraphIndex


class EntryKind(str, Enum):
    """What an ontology node describes."""

    CLASS = "class"
    PROPERTY = "property"
    OTHER = "other"


@dataclass(frozen=True)
class SchemaEntry:
    """
    One ontology graph node, normalized at the parsing boundary.
    Every multi-valued field is a tuple, absent fields are empty tuples.
    """

    id: str
    """
    Namespace-stripped identifier, e.g. 'CreativeWork'.
    """
    kind: EntryKind
    comment: str = ""
    """
    Raw comment, may contain markup.
    """
    sub_class_of: Tuple[str, ...] = ()
    domain_includes: Tuple[str, ...] = ()
    range_includes: Tuple[str, ...] = ()
    label: str = ""
    uri: str = ""
    """
    The original fully-qualified identifier.
    """

    @property
    def is_class(self) -> bool:
        return self.kind == EntryKind.CLASS

    @property
    def is_property(self) -> bool:
        return self.kind == EntryKind.PROPERTY


@dataclass
class PropertyDefinition:
    """A property attached to the class that declares it, with its translated value types."""

    name: str
    description: str
    types: List[str] = field(default_factory=list)
    source_id: str = ""

    @property
    def field_name(self) -> str:
        return NamingRegistry.field_name(self.name)

    @property
    def type_hint(self) -> str:
        """
        The annotation used in the generated trait, e.g. 'Optional[Union[str, Person]]'.
        """
        types = list(OrderedSet(NamingRegistry.class_name(t) for t in self.types))
        if not types:
            return "Any"
        if len(types) == 1:
            return f"Optional[{types[0]}]"
        return f"Optional[Union[{', '.join(types)}]]"


@dataclass
class ClassModel:
    """
    Everything needed to render the trait of one ontology class, and the class artifact of a
    requested one.
    """

    name: str
    description: str = ""
    parents: List[str] = field(default_factory=list)
    """
    Direct parents only.
    """
    properties: Dict[str, PropertyDefinition] = field(default_factory=dict)
    traits: List[str] = field(default_factory=list)
    """
    The trait chain composed by the class artifact, its own name first followed by every ancestor.
    """

    @property
    def class_name(self) -> str:
        return NamingRegistry.class_name(self.name)

    @property
    def trait_name(self) -> str:
        return f"{self.class_name}Trait"

    @property
    def module_name(self) -> str:
        return NamingRegistry.module_name(self.name)

    @property
    def trait_module_name(self) -> str:
        return f"{self.module_name}_trait"


@dataclass
class ResolutionContext:
    """
    The state of one generation run, passed from stage to stage.
    """

    index: GraphIndex
    requested: List[str] = field(default_factory=list)
    required: OrderedSet = field(default_factory=OrderedSet)
    """
    Classes that must be generated, in first-discovery order.
    """
    properties: Dict[str, Dict[str, PropertyDefinition]] = field(default_factory=dict)
    """
    Class name -> property label -> definition.
    """
    suggestions: Set[str] = field(default_factory=set)
    """
    Non-primitive value types met in property ranges.
    """


@dataclass
class GenerationResult:
    """The output of the core: class models ready for rendering plus advisory suggestions."""

    classes: List[ClassModel] = field(default_factory=list)
    requested: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    @property
    def by_name(self) -> Dict[str, ClassModel]:
        return {c.name: c for c in self.classes}

    @property
    def unresolved_suggestions(self) -> List[str]:
        """Suggested classes that are not requested, so no class module is generated for them."""
        requested = set(self.requested)
        return [s for s in self.suggestions if s not in requested]
