from __future__ import annotations

from typing_extensions import Dict, Optional

from .schema_info import PropertyDefinition, ResolutionContext, SchemaEntry
from .type_mapper import TypeMapper
from .. import logger
from ..utils import strip_markup


class PropertyCollector:
    """
    Attaches ontology properties to the required classes that declare them (their domains).
    """

    def __init__(self, type_mapper: Optional[TypeMapper] = None):
        """
        :param type_mapper: The translator of property ranges. A new one is created per run if not given.
        """
        self.type_mapper = type_mapper

    def collect(self, context: ResolutionContext) -> ResolutionContext:
        """
        Single pass over all property entries of the ontology. A property is stored for each of its
        domains that is a required class, properties of other classes are skipped.

        :param context: A context whose required set is complete.
        :return: The context with its property maps and suggestions filled.
        """
        mapper = self.type_mapper or TypeMapper(suggestions=context.suggestions)
        for entry in context.index.properties():
            for domain in entry.domain_includes:
                if domain not in context.required:
                    continue
                self._register(context, mapper, domain, entry)
        if mapper.suggestions is not context.suggestions:
            context.suggestions.update(mapper.suggestions)
        return context

    @staticmethod
    def _register(
        context: ResolutionContext,
        mapper: TypeMapper,
        class_name: str,
        entry: SchemaEntry,
    ):
        class_properties: Dict[str, PropertyDefinition] = context.properties.setdefault(
            class_name, {}
        )
        label = entry.label or entry.id
        if label in class_properties:
            logger.debug(
                f"[property_collector]: '{label}' is registered twice on '{class_name}', keeping the last one."
            )
        class_properties[label] = PropertyDefinition(
            name=label,
            description=strip_markup(entry.comment),
            types=[mapper.translate(t)[0] for t in entry.range_includes],
            source_id=entry.uri or entry.id,
        )
