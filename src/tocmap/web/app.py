"""FastAPI application exposing TOC resolution."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ValidationError

from tocmap.config import AppConfig
from tocmap.manifest import ManifestBuild, Resolution, TocManifest, load_manifest

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="tocmap", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_manifest_path: Path | None = None


class ResolvePayload(BaseModel):
    manifest: TocManifest
    documents: List[str] = []


class ContainsPayload(BaseModel):
    manifest: TocManifest
    toc: str


def configure(manifest_path: Path | None) -> None:
    """Set the manifest served by ``GET /manifest``."""
    global _manifest_path
    _manifest_path = manifest_path


def _resolve_manifest_path() -> Path:
    if _manifest_path is not None:
        return _manifest_path
    return AppConfig().resolve_manifest_path(Path.cwd())


def _resolve(build: ManifestBuild, documents: List[str] | None) -> List[Resolution]:
    try:
        return build.resolve(documents)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0]) from exc


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/resolve")
async def resolve_documents(payload: ResolvePayload) -> dict[str, List[Resolution]]:
    build = payload.manifest.build()
    return {"results": _resolve(build, payload.documents or None)}


@app.post("/contains")
async def contains_toc(payload: ContainsPayload) -> dict[str, bool]:
    build = payload.manifest.build()
    found = payload.toc in build.registry and build.toc_map.contains(build.lookup(payload.toc))
    return {"contains": found}


@app.get("/manifest")
async def resolve_manifest() -> dict[str, List[Resolution]]:
    """Resolve every document of the configured manifest file."""
    path = _resolve_manifest_path()
    if not path.exists():
        raise HTTPException(status_code=404, detail=f"Manifest not found at {path}")
    try:
        build = load_manifest(path).build()
    except ValidationError as exc:
        LOGGER.error("Invalid manifest %s: %s", path, exc)
        raise HTTPException(status_code=500, detail=f"Invalid manifest at {path}") from exc
    return {"results": _resolve(build, None)}
