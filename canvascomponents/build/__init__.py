"""
Bundle assembly, bookmarklet encoding and the build orchestrator.
"""

from canvascomponents.build.assembler import (
    serialize_component,
    serialize_components,
    splice_template,
)
from canvascomponents.build.bookmarklet import bookmarklet_html, create_bookmarklet, encode_uri
from canvascomponents.build.pipeline import (
    BuildResult,
    build,
    discover_components,
    process_components,
)

__all__ = [
    # Assembly
    "serialize_component",
    "serialize_components",
    "splice_template",
    # Encoding
    "bookmarklet_html",
    "create_bookmarklet",
    "encode_uri",
    # Orchestrator
    "BuildResult",
    "build",
    "discover_components",
    "process_components",
]
