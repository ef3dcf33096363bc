"""UHT Manufacturing — domain ontology and sample transactions.

Case study: a dairy cooperative network tracing UHT milk batches from
sterilization through the cold chain. Every plant and distributor loads
the same core + domain ontology and shape set from ``ontologies/``:

  ontologies/core.ttl                        — shared traceability core
  ontologies/uht_manufacturing.ttl           — UHT domain, with annotations
  ontologies/shapes/core.shapes.ttl          — core SHACL shapes
  ontologies/shapes/uht_manufacturing.shapes.ttl — domain SHACL shapes
"""

from __future__ import annotations

from pathlib import Path

from domain_ontology import OntologyConfig, OntologyManager

ONTOLOGY_DIR = Path(__file__).parent / "ontologies"
DOMAIN_ONTOLOGY_PATH = ONTOLOGY_DIR / "uht_manufacturing.ttl"


def build_config() -> OntologyConfig:
    """Config for the UHT domain using the directory conventions."""
    return OntologyManager.load_domain_ontology(str(DOMAIN_ONTOLOGY_PATH))


def build_manager() -> OntologyManager:
    return OntologyManager(build_config())


# ---------------------------------------------------------------------------
# Sample transactions
# ---------------------------------------------------------------------------

STERILIZATION_OK = """\
@prefix uht: <http://example.org/traceability/uht#> .
@prefix core: <http://example.org/traceability/core#> .

uht:batch_2024_0412 a uht:UHTBatch ;
    core:batchId "UHT-2024-0412" ;
    core:producedAt uht:plant_north ;
    uht:sterilizationTemperature 138.5 ;
    uht:holdSeconds 4 .
"""

STERILIZATION_UNDERHEATED = """\
@prefix uht: <http://example.org/traceability/uht#> .
@prefix core: <http://example.org/traceability/core#> .

uht:batch_2024_0413 a uht:UHTBatch ;
    core:batchId "UHT-2024-0413" ;
    uht:sterilizationTemperature 121.0 ;
    uht:holdSeconds 4 .
"""

# N-Triples, as emitted by a distributor's legacy export
COLD_CHAIN_MISSING_ID = (
    "<http://example.org/traceability/uht#pallet_77> "
    "<http://www.w3.org/1999/02/22-rdf-syntax-ns#type> "
    "<http://example.org/traceability/core#Batch> .\n"
)
