"""Core value types for domain ontology management.

DomainConfig  — the domain vocabulary derived from an ontology file
OntologyStats — best-effort counts over the loaded schema
RdfFormat     — serialization formats the store can ingest
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Seed transaction types: compiled-in policy for every domain
# ---------------------------------------------------------------------------

STANDARD_TRANSACTION_TYPES: tuple[str, ...] = (
    "Production",
    "Processing",
    "Transport",
    "Quality",
    "Transfer",
    "Environmental",
    "Compliance",
    "Governance",
)


# ---------------------------------------------------------------------------
# RdfFormat: serializations understood by the store
# ---------------------------------------------------------------------------

class RdfFormat(Enum):
    """RDF serialization formats, valued by their rdflib parser name."""
    TURTLE = "turtle"
    RDF_XML = "xml"
    N_TRIPLES = "nt"
    N_QUADS = "nquads"

    @property
    def parser_name(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# DomainConfig
# ---------------------------------------------------------------------------

@dataclass
class DomainConfig:
    """Configuration of one application domain (e.g. "uht_manufacturing").

    Transaction types keep insertion order and never hold duplicates.
    Validation rules map a rule name to its raw string value.
    """

    domain_name: str
    description: str
    supported_transaction_types: list[str] = field(default_factory=list)
    validation_rules: dict[str, str] = field(default_factory=dict)

    def add_transaction_type(self, transaction_type: str) -> None:
        if transaction_type not in self.supported_transaction_types:
            self.supported_transaction_types.append(transaction_type)

    def add_validation_rule(self, rule_name: str, rule_value: str) -> None:
        self.validation_rules[rule_name] = rule_value

    def supports_transaction_type(self, transaction_type: str) -> bool:
        return transaction_type in self.supported_transaction_types

    def __repr__(self) -> str:
        return (
            f"DomainConfig({self.domain_name}: "
            f"{len(self.supported_transaction_types)} transaction types, "
            f"{len(self.validation_rules)} rules)"
        )


# ---------------------------------------------------------------------------
# OntologyStats
# ---------------------------------------------------------------------------

@dataclass
class OntologyStats:
    """Statistics about the loaded ontology. Recomputed on every request."""
    class_count: int = 0
    property_count: int = 0
    individual_count: int = 0

    def total_entities(self) -> int:
        return self.class_count + self.property_count + self.individual_count

    def summary(self) -> str:
        lines = [
            "Ontology Statistics",
            "-" * 50,
            f"  Classes:     {self.class_count}",
            f"  Properties:  {self.property_count}",
            f"  Individuals: {self.individual_count}",
            f"  Total:       {self.total_entities()}",
        ]
        return "\n".join(lines)
