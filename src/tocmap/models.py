"""Core tocmap data models."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass


@dataclass(eq=False, slots=True)
class Document:
    """A content or TOC file in a documentation build.

    Documents hash and compare by identity, so a build must hand out a single
    instance per logical file.
    """

    site_path: str

    @property
    def file_name(self) -> str:
        return posixpath.basename(self.site_path)

    @property
    def stem(self) -> str:
        """File name without its extension.

        Everything from the last dot on is the extension, so ``.md`` has an
        empty stem.
        """
        name = self.file_name
        dot = name.rfind(".")
        return name[:dot] if dot >= 0 else name

    def __repr__(self) -> str:
        return f"Document({self.site_path!r})"
