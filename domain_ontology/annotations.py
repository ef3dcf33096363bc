"""Domain configuration from ontology annotations.

Ontology authors annotate domain files with plain comments that sit
outside the RDF grammar:

    # Transaction type: Recall
    # Validation rule: max_temperature=100

and describe the domain with the ontology's first ``rdfs:comment``.
Scanning is purely textual so it never depends on the RDF parser, and
it never fails: anything malformed is skipped and defaults stay.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from .config import OntologyConfig
from .types import STANDARD_TRANSACTION_TYPES, DomainConfig

logger = structlog.get_logger(__name__)

DESCRIPTION_MARKER = "rdfs:comment"
TRANSACTION_TYPE_MARKER = "# Transaction type:"
VALIDATION_RULE_MARKER = "# Validation rule:"


def new_domain_config(domain_name: str) -> DomainConfig:
    """A DomainConfig seeded with the standard transaction types."""
    domain_config = DomainConfig(
        domain_name=domain_name,
        description=f"Domain configuration for {domain_name}",
    )
    for tx_type in STANDARD_TRANSACTION_TYPES:
        domain_config.add_transaction_type(tx_type)
    return domain_config


def load_domain_config(config: OntologyConfig) -> DomainConfig:
    """Derive the DomainConfig for ``config``'s domain ontology.

    A missing or unreadable ontology file yields the seeded defaults.
    """
    domain_config = new_domain_config(config.domain_name())

    try:
        content = Path(config.domain_ontology_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug(
            "domain_annotations_unavailable",
            path=config.domain_ontology_path,
            error=str(exc),
        )
        return domain_config

    extract_domain_info(domain_config, content)
    return domain_config


def extract_domain_info(domain_config: DomainConfig, ontology_content: str) -> None:
    """Apply description and comment annotations found in ``ontology_content``."""
    description = extract_description(ontology_content)
    if description is not None:
        domain_config.description = description

    for line in ontology_content.splitlines():
        tx_type = _annotation_value(line, TRANSACTION_TYPE_MARKER)
        if tx_type is not None:
            domain_config.add_transaction_type(tx_type)

        rule = _annotation_value(line, VALIDATION_RULE_MARKER)
        if rule is not None and "=" in rule:
            rule_name, rule_value = rule.split("=", 1)
            domain_config.add_validation_rule(rule_name.strip(), rule_value.strip())


def extract_description(ontology_content: str) -> str | None:
    """First quoted string after the first ``rdfs:comment``, if any."""
    marker = ontology_content.find(DESCRIPTION_MARKER)
    if marker == -1:
        return None
    quote_start = ontology_content.find('"', marker)
    if quote_start == -1:
        return None
    quote_end = ontology_content.find('"', quote_start + 1)
    if quote_end == -1:
        return None
    return ontology_content[quote_start + 1:quote_end]


def _annotation_value(line: str, marker: str) -> str | None:
    """Trimmed text after ``marker`` on ``line``, or None if absent."""
    _, found, rest = line.partition(marker)
    if not found:
        return None
    # Text up to a repeated marker on the same line
    return rest.split(marker, 1)[0].strip()
