from __future__ import annotations

from typing_extensions import Dict, Iterable, Iterator, List, Optional

from .schema_info import SchemaEntry
from .. import logger
from ..exceptions import DuplicateIdentifierError


class GraphIndex:
    """Lookup from a stripped class/property identifier to its ontology entry."""

    def __init__(self, entries: Iterable[SchemaEntry]):
        """
        Index the flattened ontology entries.

        :param entries: All entries of the snapshot, in document order.
        :raises DuplicateIdentifierError: If two entries share an identifier but not a kind.
        """
        self._entries: List[SchemaEntry] = []
        self._by_id: Dict[str, SchemaEntry] = {}
        for entry in entries:
            self._add(entry)

    def _add(self, entry: SchemaEntry):
        existing = self._by_id.get(entry.id)
        if existing is not None:
            if existing.kind != entry.kind:
                raise DuplicateIdentifierError(
                    entry.id, existing.kind.value, entry.kind.value
                )
            logger.debug(
                f"[graph_index]: '{entry.id}' is declared more than once, the last declaration is indexed."
            )
        self._by_id[entry.id] = entry
        self._entries.append(entry)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._by_id

    def __getitem__(self, identifier: str) -> SchemaEntry:
        return self._by_id[identifier]

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[SchemaEntry]:
        return iter(self._entries)

    def get(self, identifier: str) -> Optional[SchemaEntry]:
        return self._by_id.get(identifier)

    def properties(self) -> List[SchemaEntry]:
        return [e for e in self._entries if e.is_property]

    def classes(self) -> List[SchemaEntry]:
        return [e for e in self._entries if e.is_class]
