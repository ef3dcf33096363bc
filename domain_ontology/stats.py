"""Best-effort statistics over the loaded ontology.

Each count comes from its own SPARQL query. A count that cannot be
computed is reported as zero and never blocks the others.
"""

from __future__ import annotations

import structlog

from .store import OntologyStore
from .types import OntologyStats

logger = structlog.get_logger(__name__)


CLASS_COUNT_QUERY = """
    SELECT (COUNT(DISTINCT ?class) AS ?count) WHERE {
        ?class a <http://www.w3.org/2002/07/owl#Class> .
    }
"""

PROPERTY_COUNT_QUERY = """
    SELECT (COUNT(DISTINCT ?property) AS ?count) WHERE {
        { ?property a <http://www.w3.org/2002/07/owl#ObjectProperty> } UNION
        { ?property a <http://www.w3.org/2002/07/owl#DatatypeProperty> }
    }
"""

INDIVIDUAL_COUNT_QUERY = """
    SELECT (COUNT(DISTINCT ?individual) AS ?count) WHERE {
        ?individual a ?class .
        ?class a <http://www.w3.org/2002/07/owl#Class> .
    }
"""


def collect_stats(store: OntologyStore) -> OntologyStats:
    """Count classes, properties, and individuals in ``store``."""
    return OntologyStats(
        class_count=count_query(store, CLASS_COUNT_QUERY, "class_count"),
        property_count=count_query(store, PROPERTY_COUNT_QUERY, "property_count"),
        individual_count=count_query(store, INDIVIDUAL_COUNT_QUERY, "individual_count"),
    )


def count_query(store: OntologyStore, sparql: str, metric: str) -> int:
    """Non-negative integer from the first binding of the first row, else 0."""
    try:
        rows = list(store.query(sparql))
    except Exception as exc:
        logger.warning("ontology_stat_failed", metric=metric, error=str(exc))
        return 0

    if not rows or len(rows[0]) == 0 or rows[0][0] is None:
        logger.warning("ontology_stat_empty", metric=metric)
        return 0

    value = str(rows[0][0]).strip()
    if not value.isdecimal():
        logger.warning("ontology_stat_unparsable", metric=metric, value=value)
        return 0
    return int(value)
