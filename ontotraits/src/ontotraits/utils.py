from __future__ import annotations

import keyword
import re

from typing_extensions import Any, List, Optional, Tuple

SCHEMA_ORG_PREFIXES: Tuple[str, ...] = (
    "http://schema.org/",
    "https://schema.org/",
    "schema:",
)
"""
Prefixes removed from ontology identifiers before they are used as class or property names.
"""

_TAG_PATTERN = re.compile(r"<[^>]*>")


def wrap_list(value: Any) -> List[Any]:
    """
    Transform a value into a list if needed. None becomes an empty list.

    :param value: A single value, a list/tuple of values or None.
    :return: The value as a list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def strip_markup(text: Optional[str]) -> str:
    """
    Remove inline (HTML) tags from an ontology comment.

    :param text: The comment, may be None.
    :return: The comment without tags, surrounding whitespace removed.
    """
    if not text:
        return ""
    return _TAG_PATTERN.sub("", text).strip()


class NamingRegistry:
    """Registry for converting ontology identifiers to Python-compatible names."""

    @staticmethod
    def strip_namespace(
        identifier: Optional[str], prefixes: Tuple[str, ...] = SCHEMA_ORG_PREFIXES
    ) -> str:
        """
        Strip the ontology namespace from an identifier.

        :param identifier: e.g. 'http://schema.org/Book' or 'schema:Book'.
        :param prefixes: The namespace prefixes to remove.
        :return: The local name, e.g. 'Book'.
        """
        if not identifier:
            return ""
        for prefix in prefixes:
            if identifier.startswith(prefix):
                return identifier[len(prefix) :]
        return identifier

    @staticmethod
    def to_snake_case(name: str) -> str:
        """Convert a name like 'worksFor' or 'WorksFor' to 'works_for'"""
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @staticmethod
    def to_python_identifier(name: str) -> str:
        """
        Make a name usable as a Python attribute or module name.

        Invalid characters become underscores, a leading digit or a keyword gets an underscore appended
        or prepended.
        """
        identifier = re.sub(r"[^a-zA-Z0-9_]", "_", name)
        if identifier[:1].isdigit():
            identifier = f"_{identifier}"
        if keyword.iskeyword(identifier) or keyword.issoftkeyword(identifier):
            identifier = f"{identifier}_"
        return identifier

    @staticmethod
    def field_name(label: str) -> str:
        """The attribute name of a property, e.g. 'dateCreated' -> 'date_created'"""
        return NamingRegistry.to_python_identifier(NamingRegistry.to_snake_case(label))

    @staticmethod
    def module_name(class_name: str) -> str:
        """The module name of a generated class, e.g. 'CreativeWork' -> 'creative_work'"""
        return NamingRegistry.to_python_identifier(
            NamingRegistry.to_snake_case(class_name)
        )

    @staticmethod
    def class_name(identifier: str) -> str:
        """The Python class name of an ontology class, e.g. '3DModel' -> '_3DModel'"""
        return NamingRegistry.to_python_identifier(identifier)
