"""
Component processing - parse, validate and minify single component files.
"""

from canvascomponents.components.css import (
    check_allowed_properties,
    iter_declared_properties,
    minify_css,
)
from canvascomponents.components.markup import minify_html
from canvascomponents.components.parser import parse_component_source
from canvascomponents.components.processor import process_component
from canvascomponents.components.script import minify_js
from canvascomponents.components.types import Component, ComponentConfig, ComponentSource

__all__ = [
    # Types
    "Component",
    "ComponentConfig",
    "ComponentSource",
    # Parsing
    "parse_component_source",
    # Minifiers
    "check_allowed_properties",
    "iter_declared_properties",
    "minify_css",
    "minify_html",
    "minify_js",
    # Pipeline
    "process_component",
]
