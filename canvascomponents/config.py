"""Centralized configuration for the component build.

Typed constants with environment overrides. Defaults match the repository
layout (components/*.html, canvascomponents.js, dist/) so a bare
``canvascomponents-build`` in the project root works without extra setup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from canvascomponents.errors import BuildError

# --- App ---
APP_VERSION: str = "1.0.0"

# --- Defaults (overridable via CANVASCOMPONENTS_* env vars) ---
_DEFAULT_GLOB = "components/*.html"
_DEFAULT_TEMPLATE = "canvascomponents.js"
_DEFAULT_DIST_DIR = "dist"
_DEFAULT_TITLE = "🍇 Canvas Components"
_DEFAULT_MAX_WORKERS = "4"

# --- Inputs ---
COMPONENTS_GLOB: str = os.getenv("CANVASCOMPONENTS_GLOB", _DEFAULT_GLOB)
TEMPLATE_PATH: str = os.getenv("CANVASCOMPONENTS_TEMPLATE", _DEFAULT_TEMPLATE)
TEMPLATE_PLACEHOLDER: str = "/*${CANVAS_COMPONENTS}*/"

# --- Outputs ---
DIST_DIR: str = os.getenv("CANVASCOMPONENTS_DIST_DIR", _DEFAULT_DIST_DIR)
BOOKMARKLET_FILENAME: str = "bookmarklet"
BOOKMARKLET_HTML_FILENAME: str = "bookmarklet.html"
MINIFIED_JS_FILENAME: str = "canvascomponents.min.js"
BOOKMARKLET_TITLE: str = os.getenv("CANVASCOMPONENTS_TITLE", _DEFAULT_TITLE)

# --- Processing ---
# CANVASCOMPONENTS_MAX_WORKERS is validated by BuildConfig.from_env, not at import
BUILD_MAX_WORKERS: int = int(_DEFAULT_MAX_WORKERS)


def _env_workers() -> int:
    value = os.getenv("CANVASCOMPONENTS_MAX_WORKERS", _DEFAULT_MAX_WORKERS)
    try:
        workers = int(value)
    except ValueError:
        workers = 0
    if workers < 1:
        raise BuildError(f"CANVASCOMPONENTS_MAX_WORKERS must be a positive integer, got {value!r}")
    return workers


@dataclass
class BuildConfig:
    """Settings for a single build run."""

    components_glob: str = COMPONENTS_GLOB
    template_path: Path = Path(TEMPLATE_PATH)
    dist_dir: Path = Path(DIST_DIR)
    root: Path = Path(".")
    workers: int = BUILD_MAX_WORKERS
    title: str = BOOKMARKLET_TITLE
    placeholder: str = TEMPLATE_PLACEHOLDER
    dry_run: bool = False

    @classmethod
    def from_env(cls, root: Path | None = None) -> BuildConfig:
        """Build a config from the current environment.

        The module constants are read at import time; this re-reads the
        environment so values loaded by python-dotenv afterwards still apply.

        Raises:
            BuildError: CANVASCOMPONENTS_MAX_WORKERS is not a positive integer.
        """
        return cls(
            components_glob=os.getenv("CANVASCOMPONENTS_GLOB", _DEFAULT_GLOB),
            template_path=Path(os.getenv("CANVASCOMPONENTS_TEMPLATE", _DEFAULT_TEMPLATE)),
            dist_dir=Path(os.getenv("CANVASCOMPONENTS_DIST_DIR", _DEFAULT_DIST_DIR)),
            root=root or Path("."),
            workers=_env_workers(),
            title=os.getenv("CANVASCOMPONENTS_TITLE", _DEFAULT_TITLE),
        )

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the project root."""
        return path if path.is_absolute() else self.root / path
