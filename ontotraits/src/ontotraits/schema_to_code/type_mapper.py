from __future__ import annotations

from dataclasses import dataclass, field

from typing_extensions import ClassVar, Dict, Optional, Set, Tuple


@dataclass
class TypeMapper:
    """
    Translates ontology value types (property ranges) into Python types.

    Types that are not primitives are kept as they are (they reference another ontology class) and are
    registered as suggestions, since generating them too resolves the reference.
    """

    suggestions: Set[str] = field(default_factory=set)
    """
    Every non-primitive type met so far. Entries are only ever added.
    """
    overrides: Optional[Dict[str, str]] = None
    """
    Additional primitive mappings, e.g. {'Float': 'float'}.
    """

    PRIMITIVE_TYPES: ClassVar[Dict[str, str]] = {
        "URL": "str",
        "Text": "str",
        "Date": "str",
        "DateTime": "str",
        "Time": "str",
        "Number": "float",
        "Integer": "int",
        "Boolean": "bool",
        "True": "bool",
        "False": "bool",
    }

    def primitive_for(self, type_name: str) -> Optional[str]:
        """
        :param type_name: The stripped ontology type name.
        :return: The Python primitive for the type or None if it is not a primitive.
        """
        if type_name in self.PRIMITIVE_TYPES:
            return self.PRIMITIVE_TYPES[type_name]
        if self.overrides and type_name in self.overrides:
            return self.overrides[type_name]
        return None

    def translate(self, type_name: str) -> Tuple[str, bool]:
        """
        Translate an ontology value type.

        :param type_name: The stripped ontology type name, e.g. 'Text' or 'Person'.
        :return: The target type and whether it is a primitive.
        """
        primitive = self.primitive_for(type_name)
        if primitive is not None:
            return primitive, True
        self.suggestions.add(type_name)
        return type_name, False
