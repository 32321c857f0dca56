"""
Reads an ontology snapshot (schema.org JSON-LD, or any RDF serialization rdflib understands) and
normalizes its nodes into :class:`SchemaEntry` objects.
"""

from __future__ import annotations

import json
import os

import rdflib
from rdflib.namespace import RDF, RDFS
from rdflib.util import guess_format
from typing_extensions import Any, Dict, Iterable, List, Optional, Tuple

from .schema_info import EntryKind, SchemaEntry
from .. import logger
from ..exceptions import SourceUnavailableError
from ..utils import NamingRegistry, SCHEMA_ORG_PREFIXES, wrap_list

HTTP_SDO = rdflib.Namespace("http://schema.org/")
HTTPS_SDO = rdflib.Namespace("https://schema.org/")


def _keys(local_name: str) -> Tuple[str, ...]:
    return (
        f"schema:{local_name}",
        str(HTTP_SDO[local_name]),
        str(HTTPS_SDO[local_name]),
    )


SUB_CLASS_OF_KEYS = ("rdfs:subClassOf", str(RDFS.subClassOf))
LABEL_KEYS = ("rdfs:label", str(RDFS.label))
COMMENT_KEYS = ("rdfs:comment", str(RDFS.comment))
DOMAIN_INCLUDES_KEYS = _keys("domainIncludes")
RANGE_INCLUDES_KEYS = _keys("rangeIncludes")
CLASS_TYPES = {"rdfs:Class", str(RDFS.Class)}
PROPERTY_TYPES = {"rdf:Property", str(RDF.Property)}
JSON_SUFFIXES = (".json", ".jsonld")


class JsonLdSnapshotReader:
    """Normalizes the nodes of a schema.org JSON-LD document."""

    def __init__(self, prefixes: Tuple[str, ...] = SCHEMA_ORG_PREFIXES):
        """
        :param prefixes: The namespace prefixes stripped from identifiers.
        """
        self.prefixes = prefixes

    @staticmethod
    def flatten(document: Any) -> List[Dict[str, Any]]:
        """
        Flatten the graph layers of a document into one list of nodes.

        Both the layered layout (a top level '@graph' of layers, each holding its own '@graph') and the
        flat layout (a top level '@graph' of nodes) are supported.

        :param document: The parsed JSON document.
        :return: All nodes, in document order.
        """
        top = document.get("@graph", []) if isinstance(document, dict) else document
        nodes: List[Dict[str, Any]] = []
        for item in wrap_list(top):
            if not isinstance(item, dict):
                continue
            if "@graph" in item and "@type" not in item:
                nodes.extend(n for n in wrap_list(item["@graph"]) if isinstance(n, dict))
            else:
                nodes.append(item)
        return nodes

    def read_document(self, document: Any) -> List[SchemaEntry]:
        """
        :param document: The parsed JSON document.
        :return: One entry per node carrying an '@id'.
        """
        return [
            self.to_entry(node)
            for node in self.flatten(document)
            if node.get("@id")
        ]

    def to_entry(self, node: Dict[str, Any]) -> SchemaEntry:
        """Normalize one JSON-LD node."""
        return SchemaEntry(
            id=self.strip(node["@id"]),
            kind=self.kind_of(node.get("@type")),
            comment=self.literal(self._first_present(node, COMMENT_KEYS)),
            sub_class_of=self.references(self._first_present(node, SUB_CLASS_OF_KEYS)),
            domain_includes=self.references(
                self._first_present(node, DOMAIN_INCLUDES_KEYS)
            ),
            range_includes=self.references(
                self._first_present(node, RANGE_INCLUDES_KEYS)
            ),
            label=self.literal(self._first_present(node, LABEL_KEYS)),
            uri=node["@id"],
        )

    def strip(self, identifier: str) -> str:
        return NamingRegistry.strip_namespace(identifier, self.prefixes)

    @staticmethod
    def kind_of(node_type: Any) -> EntryKind:
        types = set(wrap_list(node_type))
        if types & CLASS_TYPES:
            return EntryKind.CLASS
        if types & PROPERTY_TYPES:
            return EntryKind.PROPERTY
        return EntryKind.OTHER

    def references(self, value: Any) -> Tuple[str, ...]:
        """
        Normalize a reference field ({'@id': ...}, a plain string, a list of them or None).
        """
        identifiers = []
        for ref in wrap_list(value):
            if isinstance(ref, dict):
                ref = ref.get("@id")
            if ref:
                identifiers.append(self.strip(str(ref)))
        return tuple(identifiers)

    @staticmethod
    def literal(value: Any) -> str:
        """
        Normalize a literal field (a string, a {'@value': ...} object or a list of them).
        English values are preferred when several languages are given.
        """
        candidates = wrap_list(value)
        if not candidates:
            return ""
        chosen = candidates[0]
        for candidate in candidates:
            if isinstance(candidate, dict) and candidate.get("@language") == "en":
                chosen = candidate
                break
        if isinstance(chosen, dict):
            chosen = chosen.get("@value", "")
        return str(chosen) if chosen is not None else ""

    @staticmethod
    def _first_present(node: Dict[str, Any], keys: Iterable[str]) -> Any:
        for key in keys:
            if key in node:
                return node[key]
        return None


class RdfSnapshotReader:
    """Normalizes the classes and properties of an rdflib graph."""

    def __init__(self, prefixes: Tuple[str, ...] = SCHEMA_ORG_PREFIXES):
        self.prefixes = prefixes

    def read_graph(self, graph: rdflib.Graph) -> List[SchemaEntry]:
        """
        :param graph: A graph holding an RDFS vocabulary using schema.org domain/range annotations.
        :return: One entry per class and property, ordered by identifier.
        """
        entries = []
        classes = set(graph.subjects(RDF.type, RDFS.Class))
        properties = set(graph.subjects(RDF.type, RDF.Property)) - classes
        for subject in sorted(classes | properties, key=str):
            if not isinstance(subject, rdflib.URIRef):
                continue
            kind = EntryKind.CLASS if subject in classes else EntryKind.PROPERTY
            entries.append(
                SchemaEntry(
                    id=self.strip(subject),
                    kind=kind,
                    comment=self._literal(graph, subject, RDFS.comment),
                    sub_class_of=self._references(graph, subject, [RDFS.subClassOf]),
                    domain_includes=self._references(
                        graph, subject, [HTTPS_SDO.domainIncludes, HTTP_SDO.domainIncludes]
                    ),
                    range_includes=self._references(
                        graph, subject, [HTTPS_SDO.rangeIncludes, HTTP_SDO.rangeIncludes]
                    ),
                    label=self._literal(graph, subject, RDFS.label),
                    uri=str(subject),
                )
            )
        return entries

    def strip(self, node: rdflib.term.Node) -> str:
        return NamingRegistry.strip_namespace(str(node), self.prefixes)

    def _references(
        self,
        graph: rdflib.Graph,
        subject: rdflib.URIRef,
        predicates: List[rdflib.URIRef],
    ) -> Tuple[str, ...]:
        objects = set()
        for predicate in predicates:
            objects.update(
                o for o in graph.objects(subject, predicate) if isinstance(o, rdflib.URIRef)
            )
        return tuple(sorted(self.strip(o) for o in objects))

    @staticmethod
    def _literal(
        graph: rdflib.Graph, subject: rdflib.URIRef, predicate: rdflib.URIRef
    ) -> str:
        values = list(graph.objects(subject, predicate))
        for value in values:
            if isinstance(value, rdflib.Literal) and value.language == "en":
                return str(value)
        return str(values[0]) if values else ""


class SnapshotReader:
    """Reads a snapshot file into ontology entries, choosing the parser from the file suffix."""

    def __init__(self, prefixes: Tuple[str, ...] = SCHEMA_ORG_PREFIXES):
        self.json_reader = JsonLdSnapshotReader(prefixes)
        self.rdf_reader = RdfSnapshotReader(prefixes)

    def read(self, path: str, rdf_format: Optional[str] = None) -> List[SchemaEntry]:
        """
        :param path: Path of the snapshot file.
        :param rdf_format: The rdflib format of non JSON files, guessed from the suffix if not given.
        :return: The normalized entries.
        :raises SourceUnavailableError: If the file cannot be read or parsed.
        """
        path = os.fspath(path)
        logger.debug(f"[snapshot_reader]: reading {path}")
        try:
            if rdf_format is None and path.lower().endswith(JSON_SUFFIXES):
                with open(path, "r", encoding="utf-8") as f:
                    return self.json_reader.read_document(json.load(f))
            graph = rdflib.Graph()
            graph.parse(path, format=rdf_format or guess_format(path))
            return self.rdf_reader.read_graph(graph)
        except (OSError, ValueError, SyntaxError) as e:
            raise SourceUnavailableError(path, str(e)) from e
