"""Bundle assembly: serialize components and splice them into the template."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from canvascomponents.components.types import Component
from canvascomponents.config import TEMPLATE_PLACEHOLDER
from canvascomponents.errors import BuildError


def _dumps(value: Any) -> str:
    # default=str covers YAML dates/timestamps in component configs.
    # U+2028/U+2029 are escaped: older engines reject them raw in string literals.
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


def serialize_component(component: Component) -> str:
    """Render one ``"key":{record}`` entry of the components object."""
    return f"{_dumps(component.key)}:{_dumps(component.record)}"


def serialize_components(components: Iterable[Component]) -> str:
    """
    Render every component as the body of a JavaScript object literal.

    Raises:
        BuildError: Two components share a lookup key.
    """
    seen: dict[str, Component] = {}
    entries: list[str] = []
    for component in components:
        existing = seen.get(component.key)
        if existing is not None:
            raise BuildError(
                f"Duplicate component name '{component.key}' in {existing.filename} "
                f"and {component.filename}"
            )
        seen[component.key] = component
        entries.append(serialize_component(component))
    return ",".join(entries)


def splice_template(template: str, serialized: str, placeholder: str = TEMPLATE_PLACEHOLDER) -> str:
    """
    Replace the first placeholder in the template with the serialized components.

    Raises:
        BuildError: The template does not contain the placeholder.
    """
    if placeholder not in template:
        raise BuildError(f"Template is missing the {placeholder} placeholder")
    return template.replace(placeholder, serialized, 1)
