from ontotraits.schema_to_code.schema_info import EntryKind, SchemaEntry


def class_entry(name, *parents, comment=""):
    return SchemaEntry(
        id=name,
        kind=EntryKind.CLASS,
        comment=comment or f"A {name}.",
        sub_class_of=tuple(parents),
        label=name,
        uri=f"http://schema.org/{name}",
    )


def property_entry(label, domains, ranges, comment=""):
    return SchemaEntry(
        id=label,
        kind=EntryKind.PROPERTY,
        comment=comment or f"The {label}.",
        domain_includes=tuple(domains),
        range_includes=tuple(ranges),
        label=label,
        uri=f"http://schema.org/{label}",
    )


def book_ontology():
    """Thing <- CreativeWork <- Book, with 'name' declared on Thing."""
    return [
        class_entry("Thing"),
        class_entry("CreativeWork", "Thing"),
        class_entry("Book", "CreativeWork"),
        property_entry("name", ["Thing"], ["Text"]),
    ]


def diamond_ontology():
    """Thing <- Left, Right <- Both (Both inherits from Left and Right)."""
    return [
        class_entry("Thing"),
        class_entry("Left", "Thing"),
        class_entry("Right", "Thing"),
        class_entry("Both", "Left", "Right"),
        property_entry("name", ["Thing"], ["Text"]),
        property_entry("side", ["Left", "Right"], ["Text"]),
    ]
