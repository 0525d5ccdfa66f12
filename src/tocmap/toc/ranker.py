"""Ranking of TOC candidates relative to a document."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, List, Optional

from tocmap.models import Document
from tocmap.utils.text import compare_ignore_case, split_words, word_edit_distance


@dataclass(slots=True)
class TocCandidate:
    """A TOC under consideration for one lookup, with its directory distance."""

    sub_directory_count: int
    parent_directory_count: int
    toc: Document
    file_names: List[str]
    _word_distance: Optional[int] = field(default=None, repr=False, compare=False)

    @property
    def word_distance(self) -> int:
        # Computed on first comparison that needs it, then reused for the lookup.
        if self._word_distance is None:
            self._word_distance = word_edit_distance(
                self.file_names, split_words(self.toc.site_path)
            )
        return self._word_distance


def compare_toc_candidates(x: TocCandidate, y: TocCandidate) -> int:
    """Compare two candidates for the same document.

    Negative when ``x`` is nearer, positive when ``y`` is nearer, zero when
    they are equal. Nearer means, in order: fewer sub directories, fewer parent
    directories, smaller word edit distance, lexicographically smaller site
    path ignoring case.
    """
    result = x.sub_directory_count - y.sub_directory_count
    if result:
        return result

    result = x.parent_directory_count - y.parent_directory_count
    if result:
        return result

    result = x.word_distance - y.word_distance
    if result:
        return result

    return compare_ignore_case(x.toc.site_path, y.toc.site_path)


def select_nearest(candidates: Iterable[TocCandidate]) -> Optional[TocCandidate]:
    """Return the nearest candidate, or ``None`` when there are none."""
    materialized = list(candidates)
    if not materialized:
        return None
    return reduce(
        lambda best, nxt: best if compare_toc_candidates(best, nxt) <= 0 else nxt,
        materialized,
    )
