"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MANIFEST = "tocmap.json"


def _get_default_manifest_path() -> Path:
    """Manifest path from ``TOCMAP_MANIFEST``, else ``tocmap.json``."""
    return Path(os.environ.get("TOCMAP_MANIFEST") or DEFAULT_MANIFEST)


@dataclass(slots=True)
class AppConfig:
    manifest_path: Path | None = None
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        if self.manifest_path is None:
            self.manifest_path = _get_default_manifest_path()

    def resolve_manifest_path(self, base_dir: Path | None = None) -> Path:
        if self.manifest_path is None:
            self.manifest_path = _get_default_manifest_path()
        if Path(self.manifest_path).is_absolute() or base_dir is None:
            return Path(self.manifest_path)
        return base_dir / self.manifest_path
