from __future__ import annotations

from typing_extensions import Iterable, List, Optional, Tuple

from .graph_index import GraphIndex
from .schema_info import ResolutionContext
from .. import logger
from ..exceptions import SchemaLookupError


class ClosureResolver:
    """
    Computes the classes that must be generated for the requested schemas: each requested class and
    every class it transitively inherits from.
    """

    @staticmethod
    def resolve(context: ResolutionContext, requested_name: str) -> ResolutionContext:
        """
        Add a requested class and all its ancestors to the required set of the context.

        Traversal is depth-first pre-order over the subclass edges, the first parent being expanded
        first. A class is marked as required before its parents are expanded, so shared ancestors and
        cycles are expanded only once.

        :param context: The context of the current run.
        :param requested_name: The class requested by the user.
        :return: The same context, with its required set extended.
        :raises SchemaLookupError: If the class or one of its ancestors is not in the ontology.
        """
        stack: List[Tuple[str, Optional[str]]] = [(requested_name, None)]
        while stack:
            name, requested_by = stack.pop()
            if not name or name in context.required:
                continue
            context.required.add(name)
            entry = context.index.get(name)
            if entry is None:
                raise SchemaLookupError(name, requested_by)
            stack.extend((parent, name) for parent in reversed(entry.sub_class_of))
        return context

    @classmethod
    def resolve_all(
        cls, context: ResolutionContext, requested_names: Iterable[str]
    ) -> ResolutionContext:
        """
        Resolve every requested class in the given order.

        :param context: The context of the current run.
        :param requested_names: The classes requested by the user.
        :return: The context with the complete required set.
        """
        for name in requested_names:
            if name and name not in context.requested:
                context.requested.append(name)
            cls.resolve(context, name)
        logger.debug(
            f"[closure]: {len(context.required)} classes required for {context.requested}."
        )
        return context


def trait_chain(index: GraphIndex, class_name: str) -> List[str]:
    """
    Flatten the ancestry of a class into the ordered list of traits its class artifact composes.

    :param index: The ontology index.
    :param class_name: The class whose chain is computed.
    :return: The class itself followed by its ancestors, depth-first, without duplicates.
    """
    chain: List[str] = []
    seen = set()
    stack = [class_name]
    while stack:
        name = stack.pop()
        if not name or name in seen:
            continue
        seen.add(name)
        chain.append(name)
        entry = index.get(name)
        if entry is not None:
            stack.extend(reversed(entry.sub_class_of))
    return chain
