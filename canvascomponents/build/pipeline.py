"""
Build orchestrator: discover → process (parallel) → assemble → minify →
encode → write.

Entry point: build()

Any failure stops the build; nothing is written unless every component
built and the bundle minified cleanly.
"""

from __future__ import annotations

import concurrent.futures
import glob
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from canvascomponents.build.assembler import serialize_components, splice_template
from canvascomponents.build.bookmarklet import bookmarklet_html, create_bookmarklet
from canvascomponents.components.processor import process_component
from canvascomponents.components.script import minify_js
from canvascomponents.components.types import Component
from canvascomponents.config import (
    BOOKMARKLET_FILENAME,
    BOOKMARKLET_HTML_FILENAME,
    MINIFIED_JS_FILENAME,
    BuildConfig,
)
from canvascomponents.errors import BuildError, ScriptError
from canvascomponents.observability.logging import get_logger
from canvascomponents.observability.telemetry import counter, log_event, time_block

logger = get_logger(__name__)


@dataclass
class BuildResult:
    """Everything a build produced, written or not."""

    components: list[Component]
    script: str
    bookmarklet: str
    html: str
    artifacts: dict[str, Path] = field(default_factory=dict)
    sizes: dict[str, int] = field(default_factory=dict)
    written: bool = False


def discover_components(pattern: str, root: Path | None = None) -> list[Path]:
    """Return component files matching ``pattern`` (relative to ``root``), sorted."""
    base = root or Path(".")
    return sorted(Path(match) for match in glob.glob(str(base / pattern)) if Path(match).is_file())


def process_components(paths: Sequence[Path], workers: int = 1) -> list[Component]:
    """
    Build every component, in parallel when ``workers`` > 1.

    Results come back in the order of ``paths`` regardless of completion
    order. The first failure cancels pending work and is raised as a
    BuildError.
    """
    if workers <= 1 or len(paths) <= 1:
        try:
            return [process_component(path) for path in paths]
        except Exception as exc:
            counter("build.component_errors")
            raise BuildError(f"Error creating components: {exc}") from exc

    built: list[tuple[int, Component]] = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_idx = {
            executor.submit(process_component, path): idx for idx, path in enumerate(paths)
        }

        for future in concurrent.futures.as_completed(future_to_idx):
            idx = future_to_idx[future]
            try:
                built.append((idx, future.result()))
            except Exception as exc:
                for pending in future_to_idx:
                    pending.cancel()
                counter("build.component_errors")
                log_event("build.component_failed", path=str(paths[idx]), error=str(exc))
                raise BuildError(f"Error creating components: {exc}") from exc

    # Restore discovery order
    built.sort(key=lambda item: item[0])
    return [component for _, component in built]


def _write_artifacts(dist_dir: Path, outputs: dict[str, str]) -> dict[str, Path]:
    try:
        dist_dir.mkdir(parents=True, exist_ok=True)
        paths = {}
        for name, content in outputs.items():
            path = dist_dir / name
            path.write_text(content, encoding="utf-8")
            paths[name] = path
    except OSError as exc:
        raise BuildError(f"Cannot write build output to {dist_dir}: {exc}") from exc
    return paths


def build(config: BuildConfig | None = None) -> BuildResult:
    """
    Run the full build.

    Args:
        config: Build settings; read from the environment when omitted.

    Returns:
        BuildResult with the components, the minified script, the
        bookmarklet URI and HTML, and artifact paths/sizes.

    Raises:
        BuildError: No components found, unreadable template, a component
            failed, or the bundle could not be minified/written.
    """
    config = config or BuildConfig.from_env()
    logger.info("Building components...")

    with time_block("build.total"):
        with time_block("build.discover"):
            paths = discover_components(config.components_glob, config.root)
        if not paths:
            raise BuildError(f"No component files match {config.components_glob!r}")

        template_path = config.resolve(config.template_path)
        try:
            template = template_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise BuildError(f"Cannot read template {template_path}: {exc}") from exc

        with time_block("build.components"):
            components = process_components(paths, config.workers)
        counter("build.components", len(components))
        logger.info("Successfully built all %d components.", len(components))

        with time_block("build.assemble"):
            full_js = splice_template(template, serialize_components(components), config.placeholder)

        with time_block("build.minify"):
            try:
                minified = minify_js(full_js, str(template_path))
            except ScriptError as exc:
                raise BuildError(f"Error minifying bundle: {exc}") from exc

        bookmarklet = create_bookmarklet(minified)
        html = bookmarklet_html(bookmarklet, config.title)

        outputs = {
            BOOKMARKLET_FILENAME: bookmarklet,
            BOOKMARKLET_HTML_FILENAME: html,
            MINIFIED_JS_FILENAME: minified,
        }
        dist_dir = config.resolve(config.dist_dir)
        result = BuildResult(
            components=components,
            script=minified,
            bookmarklet=bookmarklet,
            html=html,
            artifacts={name: dist_dir / name for name in outputs},
            sizes={name: len(content.encode("utf-8")) for name, content in outputs.items()},
        )

        if config.dry_run:
            logger.info("Dry run: %d artifacts not written", len(outputs))
        else:
            with time_block("build.write"):
                result.artifacts = _write_artifacts(dist_dir, outputs)
            result.written = True
            logger.info("Outputted bookmarklet to %s", result.artifacts[BOOKMARKLET_FILENAME])

    log_event("build.completed", components=len(components), dry_run=config.dry_run)
    return result
