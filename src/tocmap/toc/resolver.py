"""Mapping between documents and the TOC files that govern them."""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from tocmap.models import Document
from tocmap.toc.ranker import TocCandidate, select_nearest
from tocmap.utils.paths import get_relative_path_to_file, normalize_file, relative_directory_info
from tocmap.utils.text import split_words

LOGGER = logging.getLogger(__name__)


class TocMapArgumentError(ValueError):
    """Raised when a TocMap is built without one of its inputs."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class TocMap:
    """Resolves the nearest TOC of a document.

    The TOC sets and the document to TOC associations are copied on
    construction and never change afterwards, so lookups may run concurrently.
    """

    def __init__(
        self,
        tocs: Optional[List[Document]],
        experimental_tocs: Optional[List[Document]],
        document_to_tocs: Optional[Mapping[Document, Iterable[Document]]],
    ) -> None:
        if tocs is None:
            raise TocMapArgumentError("tocs")
        if experimental_tocs is None:
            raise TocMapArgumentError("experimental_tocs")
        if document_to_tocs is None:
            raise TocMapArgumentError("document_to_tocs")

        # Tuples keep caller order for iteration; frozensets answer membership.
        self._toc_list = tuple(dict.fromkeys(tocs))
        self._tocs = frozenset(self._toc_list)
        self._experimental_tocs = frozenset(experimental_tocs)
        self._document_to_tocs = {
            document: tuple(dict.fromkeys(referenced)) for document, referenced in document_to_tocs.items()
        }
        LOGGER.debug(
            "TOC map built with %d tocs, %d experimental tocs, %d referenced documents",
            len(self._tocs),
            len(self._experimental_tocs),
            len(self._document_to_tocs),
        )

    def contains(self, toc: Document) -> bool:
        return toc in self._tocs or toc in self._experimental_tocs

    def find_toc_relative_path(self, document: Document) -> Optional[str]:
        """Relative path from the document to its nearest TOC, if any."""
        nearest_toc = self.get_nearest_toc(document)
        if nearest_toc is None:
            return None
        return normalize_file(get_relative_path_to_file(document.site_path, nearest_toc.site_path))

    def get_nearest_toc(self, document: Document) -> Optional[Document]:
        """Return the nearest TOC relative to the document.

        "Near" means fewer sub directories; on equal sub directory counts it
        means fewer parent directories, so ``../../a/TOC.md`` is nearer than
        ``b/c/TOC.md``. Word edit distance to the file name and then the site
        path break remaining ties. A document without referenced TOCs only
        considers primary TOCs in the same or a higher folder level.
        """
        referenced = self._document_to_tocs.get(document)
        has_referenced_tocs = referenced is not None
        tocs = referenced if has_referenced_tocs else self._toc_list

        file_names = split_words(document.stem)
        candidates: List[TocCandidate] = []
        for toc in tocs:
            sub_count, parent_count = relative_directory_info(document.site_path, toc.site_path)
            if has_referenced_tocs or parent_count >= sub_count:
                candidates.append(TocCandidate(sub_count, parent_count, toc, file_names))

        nearest = select_nearest(candidates)
        if nearest is None:
            LOGGER.debug("No toc candidate for %s", document.site_path)
            return None

        LOGGER.debug(
            "Nearest toc for %s is %s (%d candidates)",
            document.site_path,
            nearest.toc.site_path,
            len(candidates),
        )
        return nearest.toc
