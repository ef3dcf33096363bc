"""Error types raised while loading, querying, and validating ontologies."""

from __future__ import annotations


class OntologyError(Exception):
    """Base class for all domain ontology errors."""


class OntologyNotFoundError(OntologyError):
    """A referenced ontology file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Ontology not found: {path}")


class OntologyLoadError(OntologyError):
    """Reading a file, or building the store or validator, failed.

    ``path`` is either a file path or a label naming the failed step
    (e.g. "SHACL validator").
    """

    def __init__(self, path: str, source: BaseException) -> None:
        self.path = path
        self.source = source
        super().__init__(f"Failed to load ontology from {path}: {source}")


class OntologyQueryError(OntologyLoadError):
    """A SPARQL query against the ontology store failed."""


class OntologyParseError(OntologyError):
    """File content was read but did not parse under its detected format."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Failed to parse ontology {path}: {message}")


class ConsistencyError(OntologyError):
    """The local ontology hash differs from the network's."""

    def __init__(self, local_hash: str, network_hash: str, message: str) -> None:
        self.local_hash = local_hash
        self.network_hash = network_hash
        self.message = message
        super().__init__(
            f"{message} (local: {local_hash}, network: {network_hash})"
        )


class ValidationError(OntologyError):
    """Transaction data could not be validated against the SHACL shapes."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
