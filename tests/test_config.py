"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from tocmap.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should create config with default values."""
        monkeypatch.delenv("TOCMAP_MANIFEST", raising=False)
        config = AppConfig()

        assert config.manifest_path == Path("tocmap.json")
        assert config.host == "127.0.0.1"
        assert config.port == 8000

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read the default manifest path from TOCMAP_MANIFEST."""
        monkeypatch.setenv("TOCMAP_MANIFEST", "build/manifest.json")

        assert AppConfig().manifest_path == Path("build/manifest.json")

    def test_custom_config(self) -> None:
        config = AppConfig(manifest_path=Path("/custom/tocmap.json"), host="0.0.0.0", port=9000)

        assert config.manifest_path == Path("/custom/tocmap.json")
        assert config.host == "0.0.0.0"
        assert config.port == 9000

    def test_resolve_manifest_path_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(manifest_path=Path("/absolute/tocmap.json"))

        assert config.resolve_manifest_path(Path("/base")) == Path("/absolute/tocmap.json")

    def test_resolve_manifest_path_relative_no_base(self) -> None:
        config = AppConfig(manifest_path=Path("relative/tocmap.json"))

        assert config.resolve_manifest_path(base_dir=None) == Path("relative/tocmap.json")

    def test_resolve_manifest_path_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig(manifest_path=Path("relative/tocmap.json"))

        resolved = config.resolve_manifest_path(base_dir=Path("/base/directory"))

        assert resolved == Path("/base/directory/relative/tocmap.json")
