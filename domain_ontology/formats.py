"""RDF format detection.

Classifies RDF text into one of the serializations the store can parse.
Content markers take precedence over the file extension:

  1. Turtle markers   — ``@prefix`` anywhere, or leading ``@prefix``/``@base``
  2. RDF/XML markers  — leading ``<?xml``/``<rdf:RDF``, or ``<rdf:RDF`` anywhere
  3. N-Triples shape  — every line blank, a comment, or ending in `` .``
  4. File extension   — with Turtle as the universal fallback
"""

from __future__ import annotations

from pathlib import PurePath

from .types import RdfFormat


_EXTENSION_FORMATS = {
    ".ttl": RdfFormat.TURTLE,
    ".turtle": RdfFormat.TURTLE,
    ".nt": RdfFormat.N_TRIPLES,
    ".nq": RdfFormat.N_QUADS,
}

# Extensions shared by RDF/XML and Turtle-encoded OWL files
_XML_OR_TURTLE_EXTENSIONS = {".owl", ".rdf", ".xml"}


def detect_rdf_format(content: str, file_path: str | None = None) -> RdfFormat:
    """Detect the RDF serialization of ``content``.

    Never raises. The result depends only on the two arguments.
    """
    trimmed = content.strip()

    if (
        trimmed.startswith("@prefix")
        or trimmed.startswith("@base")
        or "@prefix" in content
    ):
        return RdfFormat.TURTLE

    if (
        trimmed.startswith("<?xml")
        or trimmed.startswith("<rdf:RDF")
        or "<rdf:RDF" in content
    ):
        return RdfFormat.RDF_XML

    # Only "\n" separates lines; U+2028 and friends may sit inside literals
    if all(_is_ntriples_line(line) for line in content.split("\n")):
        return RdfFormat.N_TRIPLES

    return _format_from_extension(content, file_path)


def _is_ntriples_line(line: str) -> bool:
    line = line.strip()
    return not line or line.startswith("#") or line.endswith(" .")


def _format_from_extension(content: str, file_path: str | None) -> RdfFormat:
    if not file_path:
        return RdfFormat.TURTLE

    suffix = PurePath(file_path).suffix.lower()
    if suffix in _XML_OR_TURTLE_EXTENSIONS:
        # Many .owl files are Turtle; only XML markers select RDF/XML
        if "<?xml" in content or "<rdf:RDF" in content:
            return RdfFormat.RDF_XML
        return RdfFormat.TURTLE
    return _EXTENSION_FORMATS.get(suffix, RdfFormat.TURTLE)
