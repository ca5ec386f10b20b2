"""
Component file parsing.

A component is a single HTML file with four sections:

    <config>        YAML metadata (required, must include ``name``)
    <style>         CSS (optional)
    <script>        JavaScript (optional)
    <main>          the markup inserted into the page (required)

The <config> body is sliced out of the raw text and handed to YAML as
written, so markup and entities in values survive. The rest of the file is
parsed with BeautifulSoup's built-in html.parser so no native parser is
needed.
"""

from __future__ import annotations

import re
from typing import Any

import yaml
from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from canvascomponents.components.types import ComponentConfig, ComponentSource
from canvascomponents.errors import ComponentError
from canvascomponents.observability.logging import get_logger

logger = get_logger(__name__)

# Canvas strips the "transition" class but keeps "thumbnail", which it styles
# the same way, so authors can write the former and still get the effect.
_CLASS_REWRITES = (("transition", "thumbnail"),)

_CONFIG_PATTERN = re.compile(r"<config\b[^>]*>(.*?)</config\s*>", re.IGNORECASE | re.DOTALL)


def _section_text(soup: BeautifulSoup, name: str) -> str | None:
    tag = soup.find(name)
    if tag is None:
        return None
    return tag.get_text()


def _load_config(text: str, filename: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ComponentError(f"invalid YAML in <config>: {exc}", filename) from exc

    if not isinstance(data, dict):
        raise ComponentError("<config> must be a YAML mapping", filename)

    config = {str(key): value for key, value in data.items()}
    try:
        ComponentConfig.model_validate(config)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ComponentError(f"invalid <config>: {problems}", filename) from exc
    return config


def rewrite_classes(main: Tag) -> int:
    """Apply the Canvas class rewrites to every element inside ``main``.

    Returns:
        Number of elements whose class attribute changed.
    """
    changed = 0
    for element in main.find_all(class_=True):
        classes = element.get_attribute_list("class")
        rewritten = list(classes)
        for old, new in _CLASS_REWRITES:
            rewritten = [value.replace(old, new) for value in rewritten]
        if rewritten != classes:
            element["class"] = rewritten
            changed += 1
    return changed


def parse_component_source(text: str, filename: str) -> ComponentSource:
    """
    Split a component file into its sections.

    Args:
        text: File contents.
        filename: Path used in error messages.

    Returns:
        ComponentSource with validated config and raw style/script/markup.

    Raises:
        ComponentError: Missing <config> or <main>, or invalid config.
    """
    match = _CONFIG_PATTERN.search(text)
    if match is None:
        raise ComponentError("missing <config> section", filename)
    config = _load_config(match.group(1), filename)

    soup = BeautifulSoup(text[: match.start()] + text[match.end() :], "html.parser")

    main = soup.find("main")
    if main is None:
        raise ComponentError("missing <main> section", filename)
    rewritten = rewrite_classes(main)
    if rewritten:
        logger.debug("%s: rewrote classes on %d elements", filename, rewritten)

    return ComponentSource(
        filename=filename,
        config=config,
        style=_section_text(soup, "style") or "",
        script=_section_text(soup, "script") or "",
        markup=main.decode_contents(),
    )
