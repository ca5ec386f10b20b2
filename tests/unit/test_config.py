"""Tests for build configuration and environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from unittest import mock

import pytest

from canvascomponents.config import TEMPLATE_PLACEHOLDER, BuildConfig
from canvascomponents.errors import BuildError


class TestBuildConfigFromEnv:
    """Tests for BuildConfig.from_env"""

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = BuildConfig.from_env()

        assert config.components_glob == "components/*.html"
        assert config.template_path == Path("canvascomponents.js")
        assert config.dist_dir == Path("dist")
        assert config.root == Path(".")
        assert config.workers == 4
        assert config.title == "🍇 Canvas Components"
        assert config.placeholder == TEMPLATE_PLACEHOLDER
        assert config.dry_run is False

    @mock.patch.dict(
        os.environ,
        {
            "CANVASCOMPONENTS_GLOB": "widgets/**/*.html",
            "CANVASCOMPONENTS_TEMPLATE": "src/loader.js",
            "CANVASCOMPONENTS_DIST_DIR": "build",
            "CANVASCOMPONENTS_MAX_WORKERS": "2",
            "CANVASCOMPONENTS_TITLE": "Kit",
        },
    )
    def test_environment_overrides(self):
        config = BuildConfig.from_env(root=Path("/srv/project"))

        assert config.components_glob == "widgets/**/*.html"
        assert config.template_path == Path("src/loader.js")
        assert config.dist_dir == Path("build")
        assert config.root == Path("/srv/project")
        assert config.workers == 2
        assert config.title == "Kit"


    @pytest.mark.parametrize("value", ["many", "0", "-2", ""])
    def test_invalid_worker_count(self, value):
        with mock.patch.dict(os.environ, {"CANVASCOMPONENTS_MAX_WORKERS": value}):
            with pytest.raises(BuildError, match="CANVASCOMPONENTS_MAX_WORKERS"):
                BuildConfig.from_env()


class TestResolve:
    """Tests for BuildConfig.resolve"""

    def test_relative_path_joined_to_root(self, tmp_path):
        config = BuildConfig(root=tmp_path)
        assert config.resolve(Path("dist")) == tmp_path / "dist"

    def test_absolute_path_unchanged(self, tmp_path):
        config = BuildConfig(root=Path("elsewhere"))
        assert config.resolve(tmp_path) == tmp_path
