"""Ontology consistency across network participants."""

from __future__ import annotations

import structlog

from .errors import ConsistencyError

logger = structlog.get_logger(__name__)


def check_consistency(local_hash: str, network_hash: str, domain_name: str) -> None:
    """Require the local ontology hash to equal the network's exactly.

    Raises:
        ConsistencyError: the hashes differ; carries both values verbatim.
    """
    if local_hash == network_hash:
        return

    logger.warning(
        "ontology_hash_mismatch",
        domain=domain_name,
        local_hash=local_hash,
        network_hash=network_hash,
    )
    raise ConsistencyError(
        local_hash,
        network_hash,
        f"Local ontology '{domain_name}' does not match network ontology. "
        "All participants must use the same domain ontology.",
    )
