"""Build manifests describing documents, TOCs and their references."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from tocmap.models import Document
from tocmap.toc.resolver import TocMap
from tocmap.utils.paths import get_relative_path_to_file, normalize_file

LOGGER = logging.getLogger(__name__)


class Resolution(BaseModel):
    document: str
    toc: Optional[str] = None
    relative_path: Optional[str] = None


class TocManifest(BaseModel):
    """Site paths of a build, as produced by upstream discovery."""

    documents: List[str] = Field(default_factory=list)
    tocs: List[str]
    experimental_tocs: List[str] = Field(default_factory=list)
    references: Dict[str, List[str]] = Field(default_factory=dict)

    def build(self) -> "ManifestBuild":
        """Create canonical documents and the TOC map over them."""
        registry = DocumentRegistry()
        tocs = [registry.get(path) for path in self.tocs]
        experimental_tocs = [registry.get(path) for path in self.experimental_tocs]
        document_to_tocs = {
            registry.get(document): list(dict.fromkeys(registry.get(toc) for toc in referenced))
            for document, referenced in self.references.items()
        }
        documents = [registry.get(path) for path in self.documents]
        toc_map = TocMap(tocs, experimental_tocs, document_to_tocs)
        return ManifestBuild(toc_map=toc_map, registry=registry, documents=documents)


@dataclass(slots=True)
class DocumentRegistry:
    """Hands out exactly one Document per site path."""

    _documents: Dict[str, Document] = field(default_factory=dict)

    def get(self, site_path: str) -> Document:
        document = self._documents.get(site_path)
        if document is None:
            document = Document(site_path)
            self._documents[site_path] = document
        return document

    def lookup(self, site_path: str) -> Document:
        try:
            return self._documents[site_path]
        except KeyError:
            raise KeyError(f"Unknown document: {site_path}") from None

    def __contains__(self, site_path: object) -> bool:
        return site_path in self._documents

    def __len__(self) -> int:
        return len(self._documents)


@dataclass(slots=True)
class ManifestBuild:
    toc_map: TocMap
    registry: DocumentRegistry
    documents: List[Document]

    def lookup(self, site_path: str) -> Document:
        return self.registry.lookup(site_path)

    def resolve(self, site_paths: Optional[Iterable[str]] = None) -> List[Resolution]:
        """Resolve the nearest TOC of the given documents, or of every manifest document."""
        documents = (
            self.documents if site_paths is None else [self.lookup(path) for path in site_paths]
        )
        results: List[Resolution] = []
        for document in documents:
            toc = self.toc_map.get_nearest_toc(document)
            if toc is None:
                results.append(Resolution(document=document.site_path))
                continue
            relative_path = normalize_file(get_relative_path_to_file(document.site_path, toc.site_path))
            results.append(
                Resolution(
                    document=document.site_path,
                    toc=toc.site_path,
                    relative_path=relative_path,
                )
            )
        return results


def load_manifest(path: Path) -> TocManifest:
    """Read and validate a JSON manifest file."""
    LOGGER.info("Loading manifest %s", path)
    manifest = TocManifest.model_validate_json(path.read_text(encoding="utf-8"))
    LOGGER.info(
        "Manifest has %d documents, %d tocs, %d experimental tocs",
        len(manifest.documents),
        len(manifest.tocs),
        len(manifest.experimental_tocs),
    )
    return manifest
