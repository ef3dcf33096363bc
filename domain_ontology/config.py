"""Schema reference — which ontology and shape files a participant uses.

Settings resolve from init kwargs first, then ``DOMAIN_ONTOLOGY_*``
environment variables. When no ``ontology_hash`` is supplied, it is
computed from the bytes of the files in the schema set, so two
participants with identical files always agree on the hash.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any, Iterable

import structlog
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from .errors import OntologyNotFoundError

logger = structlog.get_logger(__name__)

CORE_ONTOLOGY_FILENAME = "core.ttl"
SHAPES_DIRNAME = "shapes"
CORE_SHAPES_FILENAME = "core.shapes.ttl"


def compute_ontology_hash(paths: Iterable[str | None]) -> str:
    """SHA-256 fingerprint over the contents of the given files, in order.

    ``None`` entries and files that do not exist are skipped. Each file's
    digest is folded in, so concatenation boundaries cannot collide.
    """
    digest = hashlib.sha256()
    for path in paths:
        if not path:
            continue
        p = Path(path)
        if not p.is_file():
            continue
        digest.update(hashlib.sha256(p.read_bytes()).digest())
    return digest.hexdigest()


class OntologyConfig(BaseSettings):
    """Paths to the ontology and SHACL shape files, plus the schema hash.

    Attributes:
        core_ontology_path: Shared core ontology. Optional; skipped if absent.
        domain_ontology_path: Domain ontology. Required.
        core_shape_path: Core SHACL shapes. Optional; skipped if absent.
        domain_shape_path: Domain SHACL shapes. Required.
        ontology_hash: Fingerprint of the whole schema set.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DOMAIN_ONTOLOGY_",
    }

    core_ontology_path: str | None = None
    domain_ontology_path: str = Field(min_length=1)
    core_shape_path: str | None = None
    domain_shape_path: str = Field(min_length=1)
    ontology_hash: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fill_ontology_hash(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("ontology_hash"):
            data = dict(data)
            data["ontology_hash"] = compute_ontology_hash(
                [
                    data.get("core_ontology_path"),
                    data.get("domain_ontology_path"),
                    data.get("core_shape_path"),
                    data.get("domain_shape_path"),
                ]
            )
        return data

    def domain_name(self) -> str:
        """Domain name, taken from the domain ontology file name."""
        return Path(self.domain_ontology_path).stem

    def ontology_files(self) -> list[str]:
        """Ontology files in load order (core first)."""
        files = [self.domain_ontology_path]
        if self.core_ontology_path:
            files.insert(0, self.core_ontology_path)
        return files


def load_domain_ontology(ontology_path: str) -> OntologyConfig:
    """Build an :class:`OntologyConfig` around an existing domain ontology.

    The remaining files follow the directory convention::

        <dir>/core.ttl
        <dir>/<domain>.ttl
        <dir>/shapes/core.shapes.ttl
        <dir>/shapes/<domain>.shapes.ttl

    Raises:
        OntologyNotFoundError: ``ontology_path`` does not exist.
    """
    path = Path(ontology_path)
    if not path.exists():
        raise OntologyNotFoundError(ontology_path)

    shapes_dir = path.parent / SHAPES_DIRNAME
    config = OntologyConfig(
        core_ontology_path=str(path.parent / CORE_ONTOLOGY_FILENAME),
        domain_ontology_path=ontology_path,
        core_shape_path=str(shapes_dir / CORE_SHAPES_FILENAME),
        domain_shape_path=str(shapes_dir / f"{path.stem}.shapes.ttl"),
    )
    logger.debug(
        "domain_ontology_config_resolved",
        path=ontology_path,
        domain=config.domain_name(),
        ontology_hash=config.ontology_hash,
    )
    return config
