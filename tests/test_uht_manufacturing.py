"""End-to-end tests for the UHT manufacturing case study."""

from pathlib import Path

import pytest

from domain_ontology import STANDARD_TRANSACTION_TYPES, ConsistencyError, RdfFormat, detect_rdf_format

from case_studies.uht_manufacturing.domain import (
    COLD_CHAIN_MISSING_ID,
    DOMAIN_ONTOLOGY_PATH,
    STERILIZATION_OK,
    STERILIZATION_UNDERHEATED,
    build_config,
    build_manager,
)


@pytest.fixture(scope="module")
def manager():
    return build_manager()


class TestSchemaSet:
    def test_conventional_paths_exist(self):
        config = build_config()
        for path in (
            config.core_ontology_path,
            config.domain_ontology_path,
            config.core_shape_path,
            config.domain_shape_path,
        ):
            assert path is not None
            assert Path(path).is_file()

    def test_domain_ontology_is_turtle(self):
        content = DOMAIN_ONTOLOGY_PATH.read_text(encoding="utf-8")
        assert detect_rdf_format(content, str(DOMAIN_ONTOLOGY_PATH)) == RdfFormat.TURTLE

    def test_hash_is_stable(self):
        assert build_config().ontology_hash == build_config().ontology_hash


class TestDomainConfig:
    def test_domain_name(self, manager):
        assert manager.domain_name == "uht_manufacturing"

    def test_description(self, manager):
        assert manager.domain_config.description == (
            "UHT milk processing and cold-chain traceability"
        )

    def test_transaction_types(self, manager):
        assert manager.supported_transaction_types == (
            *STANDARD_TRANSACTION_TYPES,
            "Sterilization",
            "ColdChain",
            "Recall",
        )

    def test_validation_rules(self, manager):
        assert manager.domain_config.validation_rules == {
            "min_sterilization_temperature": "135",
            "max_sterilization_temperature": "150",
            "min_hold_seconds": "2",
        }


class TestTransactions:
    def test_sterilization_ok(self, manager):
        assert manager.validate_transaction(STERILIZATION_OK).conforms

    def test_underheated_batch_rejected(self, manager):
        result = manager.validate_transaction(STERILIZATION_UNDERHEATED)
        assert not result.conforms
        assert result.violations[0].path.endswith("#sterilizationTemperature")

    def test_cold_chain_pallet_without_id_rejected(self, manager):
        result = manager.validate_transaction(COLD_CHAIN_MISSING_ID)
        assert not result.conforms
        assert result.violations[0].path.endswith("#batchId")


class TestNetwork:
    def test_stale_peer_refused(self, manager):
        with pytest.raises(ConsistencyError) as exc_info:
            manager.check_ontology_consistency("0" * 64)
        assert "'uht_manufacturing'" in exc_info.value.message

    def test_peer_with_same_files_accepted(self, manager):
        peer = build_manager()
        manager.check_ontology_consistency(peer.ontology_hash)


class TestStats:
    def test_counts(self, manager):
        stats = manager.get_ontology_stats()
        assert stats.class_count == 6
        assert stats.property_count == 5
        assert stats.individual_count == 2
        assert stats.total_entities() == 13


class TestWalkthrough:
    def test_run_main(self, capsys, monkeypatch):
        from case_studies.uht_manufacturing import run

        monkeypatch.setattr(run, "configure_logging", lambda **kwargs: None)
        run.main()
        out = capsys.readouterr().out
        assert "STEP 1" in out
        assert "uht_manufacturing" in out
        assert "DOES NOT CONFORM" in out
        assert "Total:       13" in out
