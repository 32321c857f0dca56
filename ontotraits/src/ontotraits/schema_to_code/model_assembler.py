from __future__ import annotations

from .closure import trait_chain
from .schema_info import ClassModel, GenerationResult, ResolutionContext
from ..utils import strip_markup


class ModelAssembler:
    """Builds the class models handed to the renderer, one per required class."""

    @staticmethod
    def assemble(context: ResolutionContext) -> GenerationResult:
        """
        :param context: A context whose required set and property maps are complete.
        :return: The class models in required-set order, the requested names and the sorted suggestions.
        """
        classes = []
        for name in context.required:
            entry = context.index[name]
            classes.append(
                ClassModel(
                    name=name,
                    description=strip_markup(entry.comment),
                    parents=[p for p in entry.sub_class_of if p],
                    properties=dict(context.properties.get(name, {})),
                    traits=trait_chain(context.index, name),
                )
            )
        return GenerationResult(
            classes=classes,
            requested=list(context.requested),
            suggestions=sorted(context.suggestions),
        )
