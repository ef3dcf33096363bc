"""Ontology Manager — one participant's loaded schema.

Owns the domain configuration, the SHACL validator, and the ontology
store, all derived from a single :class:`OntologyConfig`. The three are
built together and replaced together; a manager never shares its store
or validator with another manager.

The manager holds no locks. Callers that reload while other calls are
in flight must serialize access themselves.
"""

from __future__ import annotations

import structlog

from .annotations import load_domain_config
from .config import OntologyConfig, load_domain_ontology
from .consistency import check_consistency
from .errors import OntologyQueryError
from .shacl import ShaclValidator, TransactionValidationResult
from .stats import collect_stats
from .store import OntologyStore, render_result
from .types import DomainConfig, OntologyStats

logger = structlog.get_logger(__name__)


def _build_state(
    config: OntologyConfig,
) -> tuple[DomainConfig, ShaclValidator, OntologyStore]:
    """Derive (domain config, validator, store) from ``config``. Fail fast."""
    domain_config = load_domain_config(config)
    validator = ShaclValidator(
        config.core_shape_path,
        config.domain_shape_path,
        config.ontology_hash,
    )
    store = OntologyStore.from_config(config)
    return domain_config, validator, store


class OntologyManager:
    """Ontology manager for domain-specific operations.

    Raises on construction if any of the domain config, validator, or
    store cannot be built; no partially built manager is returned.
    """

    def __init__(self, config: OntologyConfig) -> None:
        self._config = config
        self._domain_config, self._validator, self._store = _build_state(config)
        logger.info(
            "ontology_manager_ready",
            domain=self.domain_name,
            ontology_hash=self.ontology_hash,
            triples=self._store.triple_count(),
        )

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    @staticmethod
    def load_domain_ontology(ontology_path: str) -> OntologyConfig:
        """Resolve a config for an existing domain ontology file.

        Raises:
            OntologyNotFoundError: ``ontology_path`` does not exist.
        """
        return load_domain_ontology(ontology_path)

    def reload(self) -> None:
        """Rebuild config, validator, and store from the current config.

        All three are built before any is installed, so a failure leaves
        the manager exactly as it was.
        """
        domain_config, validator, store = _build_state(self._config)
        self._domain_config, self._validator, self._store = domain_config, validator, store
        logger.info(
            "ontology_manager_reloaded",
            domain=self.domain_name,
            ontology_hash=self.ontology_hash,
        )

    def copy(self) -> OntologyManager:
        """An independent manager re-derived from the same config.

        The store and validator are rebuilt from files, never shared.
        Any failure to rebuild them propagates.
        """
        return OntologyManager(self._config)

    def __copy__(self) -> OntologyManager:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> OntologyManager:
        return self.copy()

    # -----------------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------------

    def validate_transaction(self, rdf_data: str) -> TransactionValidationResult:
        """Validate transaction data using SHACL."""
        return self._validator.validate_transaction(rdf_data)

    def query_ontology(self, sparql_query: str) -> str:
        """Run a SPARQL query and render its result as text."""
        result = self._store.query(sparql_query)
        try:
            return render_result(result)
        except Exception as exc:
            raise OntologyQueryError("SPARQL solution", exc) from exc

    def check_ontology_consistency(self, network_hash: str) -> None:
        """Raise ConsistencyError unless ``network_hash`` matches ours."""
        check_consistency(self.ontology_hash, network_hash, self.domain_name)

    def get_ontology_stats(self) -> OntologyStats:
        return collect_stats(self._store)

    # -----------------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------------

    @property
    def config(self) -> OntologyConfig:
        return self._config

    @property
    def domain_config(self) -> DomainConfig:
        return self._domain_config

    @property
    def validator(self) -> ShaclValidator:
        return self._validator

    @property
    def ontology_hash(self) -> str:
        return self._config.ontology_hash

    @property
    def domain_name(self) -> str:
        return self._domain_config.domain_name

    @property
    def supported_transaction_types(self) -> tuple[str, ...]:
        return tuple(self._domain_config.supported_transaction_types)

    def __repr__(self) -> str:
        return (
            f"OntologyManager(domain={self.domain_name!r}, "
            f"hash={self.ontology_hash!r}, "
            f"config={self._config!r}, "
            f"domain_config={self._domain_config!r}, "
            f"validator={self._validator!r}, store=<Store>)"
        )
