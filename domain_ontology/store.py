"""Ontology store — an in-memory RDF dataset holding the loaded schema.

Each loaded file becomes its own named graph; SPARQL queries see the
union of all of them through the default graph.
"""

from __future__ import annotations

from pathlib import Path, PurePath

import structlog
from rdflib import OWL, RDF, RDFS, XSD, Dataset, Literal
from rdflib.query import Result
from rdflib.term import Node

from .config import OntologyConfig
from .errors import OntologyLoadError, OntologyParseError, OntologyQueryError
from .formats import detect_rdf_format
from .types import RdfFormat

logger = structlog.get_logger(__name__)

GRAPH_NAME_PREFIX = "urn:domain-ontology:"


def graph_name(path: str) -> str:
    """Named graph (and parse base) for an ontology file.

    Only the file name is used, so relative IRIs resolve the same way on
    every participant that holds the same files.
    """
    return GRAPH_NAME_PREFIX + PurePath(path).name


class OntologyStore:
    """RDF store for one participant's ontology files."""

    def __init__(self) -> None:
        self._dataset = Dataset(default_union=True)
        self._dataset.bind("owl", OWL)
        self._dataset.bind("rdf", RDF)
        self._dataset.bind("rdfs", RDFS)
        self._dataset.bind("xsd", XSD)

    # -----------------------------------------------------------------------
    # Loading
    # -----------------------------------------------------------------------

    @classmethod
    def from_config(cls, config: OntologyConfig) -> OntologyStore:
        """Load the core ontology (if present) and the domain ontology.

        Raises:
            OntologyLoadError: the domain ontology could not be read.
            OntologyParseError: a file did not parse under its detected format.
        """
        store = cls()

        core_path = config.core_ontology_path
        if core_path and Path(core_path).exists():
            store.load_file(core_path)
        else:
            logger.debug("core_ontology_skipped", path=core_path)

        store.load_file(config.domain_ontology_path)
        return store

    def load_file(self, path: str) -> RdfFormat:
        """Read ``path``, detect its format, and load it into the store."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise OntologyLoadError(path, exc) from exc

        fmt = detect_rdf_format(content, path)
        self.load_text(fmt, content, path)
        return fmt

    def load_text(self, fmt: RdfFormat, content: str, path: str) -> None:
        """Parse ``content`` as ``fmt`` into a named graph for ``path``."""
        before = self.triple_count()
        try:
            self._dataset.parse(
                data=content,
                format=fmt.parser_name,
                publicID=graph_name(path),
            )
        except Exception as exc:
            raise OntologyParseError(path, f"{fmt.name} parse failed: {exc}") from exc

        logger.info(
            "ontology_file_loaded",
            path=path,
            format=fmt.name,
            triples=self.triple_count() - before,
        )

    # -----------------------------------------------------------------------
    # Querying
    # -----------------------------------------------------------------------

    def query(self, sparql: str) -> Result:
        """Execute a SPARQL query over the union of all loaded graphs."""
        try:
            return self._dataset.query(sparql)
        except Exception as exc:
            raise OntologyQueryError("SPARQL query", exc) from exc

    def triple_count(self) -> int:
        return sum(1 for _ in self._dataset.triples((None, None, None)))

    def __repr__(self) -> str:
        return f"OntologyStore({self.triple_count()} triples)"


# ---------------------------------------------------------------------------
# Result rendering
# ---------------------------------------------------------------------------

def render_result(result: Result) -> str:
    """Render a query result as text, one line per row or triple.

    SELECT    — ``?var=<term> ...`` with terms in N-Triples form
    CONSTRUCT — ``<s> <p> <o> .``
    ASK       — ``true`` or ``false``
    """
    if result.type == "ASK":
        return "true" if result.askAnswer else "false"

    lines = []
    if result.type == "SELECT":
        for row in result:
            bindings = row.asdict()
            lines.append(
                " ".join(
                    f"?{var}={_nt_term(bindings[str(var)])}"
                    for var in result.vars
                    if str(var) in bindings
                )
            )
    else:
        for s, p, o in result:
            lines.append(f"{_nt_term(s)} {_nt_term(p)} {_nt_term(o)} .")

    return "".join(f"{line}\n" for line in lines)


def _nt_term(node: Node) -> str:
    if not isinstance(node, Literal):
        return node.n3()

    # Same escapes as rdflib's N-Triples serializer; keeps a term on one line
    lexical = (
        str(node)
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    if node.language:
        return f'"{lexical}"@{node.language}'
    if node.datatype and node.datatype != XSD.string:
        return f'"{lexical}"^^<{node.datatype}>'
    return f'"{lexical}"'
