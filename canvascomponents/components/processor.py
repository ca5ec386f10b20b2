"""
Per-component pipeline: read → parse → minify style → allow-list check →
minify script → minify markup.

Entry point: process_component()
"""

from __future__ import annotations

from pathlib import Path

from canvascomponents.components.css import check_allowed_properties, minify_css
from canvascomponents.components.markup import minify_html
from canvascomponents.components.parser import parse_component_source
from canvascomponents.components.script import minify_js
from canvascomponents.components.types import Component
from canvascomponents.errors import ComponentError
from canvascomponents.observability.logging import get_logger
from canvascomponents.observability.telemetry import counter

logger = get_logger(__name__)


def process_component(path: Path | str) -> Component:
    """
    Build one component file.

    The bundled record is the component's config followed by ``style``,
    ``script`` and ``html``; those three always win over config keys of the
    same name.

    Raises:
        ComponentError: (or a subclass) naming the file on any failure.
    """
    filename = str(path)
    logger.debug("Building %s...", filename)

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ComponentError(f"cannot read file: {exc}", filename) from exc

    source = parse_component_source(text, filename)

    style = minify_css(source.style, filename)
    check_allowed_properties(style, filename)
    script = minify_js(source.script, filename)
    html = minify_html(source.markup)

    record = {**source.config, "style": style, "script": script, "html": html}
    counter("components.processed")
    return Component(name=source.name, filename=filename, record=record)
