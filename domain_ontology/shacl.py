"""SHACL validation of transaction data.

The validator holds one shapes graph built from the core and domain
shape files, tagged with the ontology hash it was built for. Transaction
RDF is parsed under its detected format and checked with pySHACL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog
from pyshacl import validate as pyshacl_validate
from rdflib import RDF, Graph
from rdflib.namespace import SH

from .errors import OntologyLoadError, ValidationError
from .formats import detect_rdf_format

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class SHACLViolation:
    """A single SHACL validation violation."""
    focus_node: str
    path: str
    message: str
    severity: str

    def __repr__(self) -> str:
        node = self.focus_node.split("/")[-1] if "/" in self.focus_node else self.focus_node
        path = self.path.split("/")[-1] if "/" in self.path else self.path
        return f"SHACLViolation({node}.{path}: {self.message})"


@dataclass
class TransactionValidationResult:
    """Outcome of validating one transaction against the shapes."""
    conforms: bool
    ontology_hash: str
    violations: list[SHACLViolation] = field(default_factory=list)
    results_text: str = ""

    def summary(self) -> str:
        lines = []
        status = "CONFORMS" if self.conforms else "DOES NOT CONFORM"
        lines.append(f"SHACL Validation: {status}")
        lines.append(f"  Ontology hash: {self.ontology_hash}")
        lines.append("-" * 50)
        if self.violations:
            lines.append(f"  Violations ({len(self.violations)}):")
            for v in self.violations:
                lines.append(f"    - {v!r}")
        else:
            lines.append("  No violations found.")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------

class ShaclValidator:
    """SHACL validator for one schema version.

    Raises:
        OntologyLoadError: the domain shapes file is missing, or a shapes
            file cannot be read or parsed.
    """

    def __init__(
        self,
        core_shape_path: str | None,
        domain_shape_path: str,
        ontology_hash: str,
    ) -> None:
        self.core_shape_path = core_shape_path
        self.domain_shape_path = domain_shape_path
        self.ontology_hash = ontology_hash
        self.shapes_graph = Graph()

        if core_shape_path and Path(core_shape_path).exists():
            self._load_shapes(core_shape_path)
        self._load_shapes(domain_shape_path)

        logger.debug(
            "shacl_validator_ready",
            shapes=len(list(self.shapes_graph.subjects(RDF.type, SH.NodeShape))),
            ontology_hash=ontology_hash,
        )

    def _load_shapes(self, path: str) -> None:
        try:
            content = Path(path).read_text(encoding="utf-8")
            fmt = detect_rdf_format(content, path)
            self.shapes_graph.parse(data=content, format=fmt.parser_name)
        except Exception as exc:
            raise OntologyLoadError(path, exc) from exc

    def validate_transaction(self, rdf_data: str) -> TransactionValidationResult:
        """Validate transaction RDF against the loaded shapes.

        Raises:
            ValidationError: the data did not parse, or pySHACL failed.
        """
        fmt = detect_rdf_format(rdf_data)
        data_graph = Graph()
        try:
            data_graph.parse(data=rdf_data, format=fmt.parser_name)
        except Exception as exc:
            raise ValidationError(
                f"Transaction data is not valid {fmt.name}: {exc}"
            ) from exc

        try:
            conforms, results_graph, results_text = pyshacl_validate(
                data_graph,
                shacl_graph=self.shapes_graph,
                inference="none",
                abort_on_first=False,
            )
        except Exception as exc:
            raise ValidationError(f"SHACL validation failed: {exc}") from exc

        violations = []
        for result in results_graph.subjects(RDF.type, SH.ValidationResult):
            focus = results_graph.value(result, SH.focusNode)
            path = results_graph.value(result, SH.resultPath)
            message = results_graph.value(result, SH.resultMessage)
            severity = results_graph.value(result, SH.resultSeverity)

            violations.append(SHACLViolation(
                focus_node=str(focus) if focus else "",
                path=str(path) if path else "",
                message=str(message) if message else "",
                severity=str(severity) if severity else "",
            ))

        if not conforms:
            logger.info(
                "transaction_nonconformant",
                violations=len(violations),
                ontology_hash=self.ontology_hash,
            )

        return TransactionValidationResult(
            conforms=conforms,
            ontology_hash=self.ontology_hash,
            violations=violations,
            results_text=results_text,
        )

    def __repr__(self) -> str:
        return (
            f"ShaclValidator({self.domain_shape_path}, "
            f"{len(self.shapes_graph)} triples, hash={self.ontology_hash[:12]})"
        )
