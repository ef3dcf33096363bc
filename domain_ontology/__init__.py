"""Domain ontology management for a shared traceability network.

Every participant loads the same ontology and SHACL shape set, identified
by a content hash, and rejects transactions that do not conform to it.
This package implements the pieces around that schema:

- Domain config: transaction types and validation rules scanned from
  comment annotations in the domain ontology
- Format detection: Turtle, RDF/XML, N-Triples, or N-Quads from content
  markers, falling back to the file extension
- Consistency: exact hash comparison against a peer's ontology hash
- Statistics: best-effort class, property, and individual counts

OntologyManager composes these over an rdflib store and a pySHACL
validator built from an OntologyConfig.
"""

from .annotations import load_domain_config
from .config import OntologyConfig, compute_ontology_hash, load_domain_ontology
from .consistency import check_consistency
from .errors import (
    ConsistencyError,
    OntologyError,
    OntologyLoadError,
    OntologyNotFoundError,
    OntologyParseError,
    OntologyQueryError,
    ValidationError,
)
from .formats import detect_rdf_format
from .manager import OntologyManager
from .stats import collect_stats
from .types import STANDARD_TRANSACTION_TYPES, DomainConfig, OntologyStats, RdfFormat

__all__ = [
    "OntologyManager",
    "OntologyConfig",
    "compute_ontology_hash",
    "load_domain_ontology",
    "detect_rdf_format",
    "load_domain_config",
    "check_consistency",
    "collect_stats",
    "DomainConfig",
    "OntologyStats",
    "RdfFormat",
    "STANDARD_TRANSACTION_TYPES",
    "OntologyError",
    "OntologyNotFoundError",
    "OntologyLoadError",
    "OntologyQueryError",
    "OntologyParseError",
    "ConsistencyError",
    "ValidationError",
]
