"""Tests for deriving a DomainConfig from ontology annotations."""

from pathlib import Path

from domain_ontology.annotations import (
    extract_description,
    extract_domain_info,
    load_domain_config,
    new_domain_config,
)
from domain_ontology.config import OntologyConfig
from domain_ontology.types import STANDARD_TRANSACTION_TYPES


def _config_for(domain_path: Path) -> OntologyConfig:
    return OntologyConfig(
        domain_ontology_path=str(domain_path),
        domain_shape_path=str(domain_path.parent / "shapes.ttl"),
        ontology_hash="fixed",
    )


class TestSeeding:
    def test_seed_types_and_default_description(self):
        config = new_domain_config("dairy")
        assert config.description == "Domain configuration for dairy"
        assert tuple(config.supported_transaction_types) == STANDARD_TRANSACTION_TYPES
        assert config.validation_rules == {}

    def test_missing_ontology_file_yields_defaults(self, tmp_path):
        config = load_domain_config(_config_for(tmp_path / "missing_domain.ttl"))
        assert config.domain_name == "missing_domain"
        assert config.description == "Domain configuration for missing_domain"
        assert tuple(config.supported_transaction_types) == STANDARD_TRANSACTION_TYPES

    def test_undecodable_file_yields_defaults(self, tmp_path):
        path = tmp_path / "binary.ttl"
        path.write_bytes(b"\xff\xfe\x00rdfs:comment \"nope\"")
        config = load_domain_config(_config_for(path))
        assert config.description == "Domain configuration for binary"


class TestDescription:
    def test_description_from_rdfs_comment(self):
        content = 'ex:Onto rdfs:comment "Test ontology for domain management" .'
        assert extract_description(content) == "Test ontology for domain management"

    def test_only_first_comment_honored(self):
        content = 'ex:A rdfs:comment "first" .\nex:B rdfs:comment "second" .\n'
        assert extract_description(content) == "first"

    def test_no_marker(self):
        assert extract_description('ex:A rdfs:label "label" .') is None

    def test_unterminated_quote(self):
        assert extract_description('ex:A rdfs:comment "dangling') is None

    def test_quote_after_marker_on_later_line(self):
        content = 'ex:A rdfs:comment\n    "on the next line" .\n'
        assert extract_description(content) == "on the next line"

    def test_quote_before_marker_ignored(self):
        content = 'ex:A rdfs:label "label" ; rdfs:comment "comment" .'
        assert extract_description(content) == "comment"


class TestAnnotationScan:
    def test_transaction_type_added(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "# Transaction type: Recall\n")
        assert config.supported_transaction_types == [*STANDARD_TRANSACTION_TYPES, "Recall"]

    def test_seed_type_annotation_not_duplicated(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "# Transaction type: Production\n")
        assert config.supported_transaction_types.count("Production") == 1
        assert len(config.supported_transaction_types) == 8

    def test_transaction_type_is_trimmed(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "   # Transaction type:    Sterilization   \n")
        assert config.supports_transaction_type("Sterilization")

    def test_empty_transaction_type_is_added(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "# Transaction type:   \n")
        assert config.supported_transaction_types[-1] == ""
        assert len(config.supported_transaction_types) == 9

    def test_validation_rule(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "# Validation rule: max_temperature=100\n")
        assert config.validation_rules == {"max_temperature": "100"}

    def test_validation_rule_trims_and_splits_on_first_equals(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "# Validation rule:  expr = a=b \n")
        assert config.validation_rules == {"expr": "a=b"}

    def test_rule_without_equals_skipped(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "# Validation rule: malformed\n")
        assert config.validation_rules == {}

    def test_forms_evaluated_independently(self):
        config = new_domain_config("dairy")
        extract_domain_info(
            config, "# Transaction type: Recall # Validation rule: limit=5\n"
        )
        assert config.supports_transaction_type("Recall # Validation rule: limit=5")
        assert config.validation_rules == {"limit": "5"}

    def test_no_annotations_keeps_defaults(self):
        config = new_domain_config("dairy")
        extract_domain_info(config, "@prefix ex: <http://example.org/> .\n")
        assert config.description == "Domain configuration for dairy"
        assert len(config.supported_transaction_types) == 8


class TestScenarios:
    def test_loader_reads_fixture_ontology(self, ontology_config):
        config = load_domain_config(ontology_config)
        assert config.domain_name == "test_domain"
        assert config.description == "Test ontology for domain management"
        assert config.supported_transaction_types == [*STANDARD_TRANSACTION_TYPES, "Recall"]
        assert config.validation_rules == {"max_temperature": "100"}
