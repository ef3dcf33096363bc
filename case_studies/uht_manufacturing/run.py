"""UHT Manufacturing — end-to-end walkthrough of a network participant.

Demonstrates each step a participant takes before accepting transactions:

  STEP 1 — Load
    Resolve the schema set, derive the domain config from annotations,
    detect each file's format, build the store and SHACL validator.

  STEP 2 — Agree
    Compare the local ontology hash with a peer's; a mismatch means the
    peer runs a different schema version and its transactions are refused.

  STEP 3 — Validate
    Check incoming transactions against the shapes.

  STEP 4 — Inspect
    Query the schema and report statistics.

Run with:  python -m case_studies.uht_manufacturing.run
"""

from domain_ontology import ConsistencyError, detect_rdf_format
from domain_ontology.logging import configure_logging

from .domain import (
    COLD_CHAIN_MISSING_ID,
    DOMAIN_ONTOLOGY_PATH,
    STERILIZATION_OK,
    STERILIZATION_UNDERHEATED,
    build_manager,
)


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def run_load():
    print_header("STEP 1: Load the schema set")
    manager = build_manager()
    domain_config = manager.domain_config

    content = DOMAIN_ONTOLOGY_PATH.read_text(encoding="utf-8")
    print(f"\n  Domain:      {manager.domain_name}")
    print(f"  Description: {domain_config.description}")
    print(f"  Format:      {detect_rdf_format(content, str(DOMAIN_ONTOLOGY_PATH)).name}")
    print(f"  Hash:        {manager.ontology_hash}")
    print(f"\n  Transaction types ({len(manager.supported_transaction_types)}):")
    for tx_type in manager.supported_transaction_types:
        print(f"    - {tx_type}")
    print(f"\n  Validation rules ({len(domain_config.validation_rules)}):")
    for name, value in domain_config.validation_rules.items():
        print(f"    - {name} = {value}")
    return manager


def run_agreement(manager):
    print_header("STEP 2: Agree on the ontology version")

    print("\n  Peer with the same schema set:")
    manager.check_ontology_consistency(manager.ontology_hash)
    print("    ✓ hashes match")

    print("\n  Peer with a stale schema set:")
    try:
        manager.check_ontology_consistency("0" * 64)
    except ConsistencyError as exc:
        print(f"    ✗ {exc.message}")
        print(f"      local:   {exc.local_hash}")
        print(f"      network: {exc.network_hash}")


def run_validation(manager):
    print_header("STEP 3: Validate incoming transactions")

    scenarios = [
        ("Sterilization at 138.5°C", STERILIZATION_OK),
        ("Sterilization at 121.0°C", STERILIZATION_UNDERHEATED),
        ("Cold-chain pallet without batch id", COLD_CHAIN_MISSING_ID),
    ]
    for title, rdf_data in scenarios:
        print(f"\n  {title}")
        result = manager.validate_transaction(rdf_data)
        for line in result.summary().splitlines():
            print(f"    {line}")


def run_inspection(manager):
    print_header("STEP 4: Inspect the schema")

    print("\n  Classes:")
    rows = manager.query_ontology(
        "SELECT ?class WHERE { ?class a <http://www.w3.org/2002/07/owl#Class> } "
        "ORDER BY ?class"
    )
    for line in rows.splitlines():
        print(f"    {line}")

    print()
    for line in manager.get_ontology_stats().summary().splitlines():
        print(f"  {line}")


def main():
    configure_logging(verbose=False)
    manager = run_load()
    run_agreement(manager)
    run_validation(manager)
    run_inspection(manager)


if __name__ == "__main__":
    main()
