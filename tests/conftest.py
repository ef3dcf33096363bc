"""Shared fixtures: a small schema set written to a temporary directory.

Layout (matches ``load_domain_ontology`` conventions)::

    <tmp>/core.ttl
    <tmp>/test_domain.ttl
    <tmp>/shapes/core.shapes.ttl
    <tmp>/shapes/test_domain.shapes.ttl

Expected counts across core + domain: 3 classes, 3 properties,
2 individuals.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from domain_ontology import OntologyConfig, OntologyManager

CORE_TTL = """\
@prefix core: <http://example.org/core#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .

core:Product a owl:Class .
core:Batch a owl:Class .
core:batchId a owl:DatatypeProperty .
core:producedBy a owl:ObjectProperty .
"""

DOMAIN_TTL = """\
@prefix ex: <http://example.org/test#> .
@prefix core: <http://example.org/core#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .

# Transaction type: Recall
# Validation rule: max_temperature=100

ex:TestOntology a owl:Ontology ;
    rdfs:comment "Test ontology for domain management" .

ex:Milk a owl:Class ;
    rdfs:subClassOf core:Product .

ex:temperature a owl:DatatypeProperty , owl:ObjectProperty .

ex:milk1 a ex:Milk .
ex:batch1 a core:Batch .
"""

CORE_SHAPES_TTL = """\
@prefix sh: <http://www.w3.org/ns/shacl#> .
@prefix core: <http://example.org/core#> .

core:BatchShape a sh:NodeShape ;
    sh:targetClass core:Batch ;
    sh:property [
        sh:path core:batchId ;
        sh:minCount 1 ;
    ] .
"""

DOMAIN_SHAPES_TTL = """\
@prefix sh: <http://www.w3.org/ns/shacl#> .
@prefix ex: <http://example.org/test#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

ex:MilkShape a sh:NodeShape ;
    sh:targetClass ex:Milk ;
    sh:property [
        sh:path ex:temperature ;
        sh:datatype xsd:decimal ;
        sh:minCount 1 ;
        sh:maxInclusive 100 ;
    ] .
"""


def write_schema_set(root: Path) -> Path:
    """Write the fixture schema set under ``root``; return the domain ontology path."""
    (root / "shapes").mkdir(parents=True, exist_ok=True)
    (root / "core.ttl").write_text(CORE_TTL, encoding="utf-8")
    (root / "test_domain.ttl").write_text(DOMAIN_TTL, encoding="utf-8")
    (root / "shapes" / "core.shapes.ttl").write_text(CORE_SHAPES_TTL, encoding="utf-8")
    (root / "shapes" / "test_domain.shapes.ttl").write_text(DOMAIN_SHAPES_TTL, encoding="utf-8")
    return root / "test_domain.ttl"


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    write_schema_set(tmp_path)
    return tmp_path


@pytest.fixture
def ontology_config(schema_dir: Path) -> OntologyConfig:
    return OntologyConfig(
        core_ontology_path=str(schema_dir / "core.ttl"),
        domain_ontology_path=str(schema_dir / "test_domain.ttl"),
        core_shape_path=str(schema_dir / "shapes" / "core.shapes.ttl"),
        domain_shape_path=str(schema_dir / "shapes" / "test_domain.shapes.ttl"),
    )


@pytest.fixture
def manager(ontology_config: OntologyConfig) -> OntologyManager:
    return OntologyManager(ontology_config)
