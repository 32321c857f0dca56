from __future__ import annotations

from dataclasses import dataclass, field

from typing_extensions import List, Optional


class OntotraitsError(Exception):
    """
    Base class of all errors raised while generating traits and classes from an ontology.
    """


@dataclass
class ConfigurationError(OntotraitsError, ValueError):
    """
    Raised when required generation inputs (schemas, namespace, folder) are missing.

    This is detected before any snapshot is fetched or resolved, so no partial work is attempted.
    """

    missing: List[str] = field(default_factory=list)
    """
    The names of the missing options.
    """

    def __post_init__(self):
        ValueError.__init__(
            self,
            f"Missing required generation option(s): {', '.join(self.missing)}.",
        )


@dataclass
class SchemaLookupError(OntotraitsError, LookupError):
    """
    Raised when a class identifier referenced through a subclass edge (or requested directly) has no
    entry in the indexed ontology.
    """

    identifier: str
    """
    The identifier that could not be found.
    """

    requested_by: Optional[str] = None
    """
    The class that referenced the missing identifier, None if the user requested it directly.
    """

    def __post_init__(self):
        requester = (
            f"class '{self.requested_by}'" if self.requested_by else "the user request"
        )
        LookupError.__init__(
            self,
            f"Schema '{self.identifier}' (required by {requester}) does not exist in the ontology.",
        )


@dataclass
class SourceUnavailableError(OntotraitsError, IOError):
    """
    Raised when the ontology snapshot could not be downloaded, cached or read.
    """

    source: str
    """
    The URL or path of the snapshot.
    """

    reason: str = ""

    def __post_init__(self):
        IOError.__init__(
            self,
            f"Ontology snapshot '{self.source}' is unavailable: {self.reason}",
        )


@dataclass
class DuplicateIdentifierError(OntotraitsError, ValueError):
    """
    Raised when two ontology entries resolve to the same identifier but disagree about what they are.
    """

    identifier: str
    existing_kind: str
    new_kind: str

    def __post_init__(self):
        ValueError.__init__(
            self,
            f"Identifier '{self.identifier}' is declared both as {self.existing_kind} and as {self.new_kind}.",
        )
