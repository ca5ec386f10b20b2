"""
Module: allowed_properties
Purpose: CSS properties that survive the Canvas rich-content sanitizer.
Dependencies: None (pure data, no imports)

Anything not listed here is stripped by Canvas when the page is saved, so the
build rejects it up front. Edit this file, not css.py, when Canvas changes
its allow-list.
"""

# ---------------------------------------------------------------------------
# Layout, box model, positioning
# ---------------------------------------------------------------------------

_LAYOUT: frozenset[str] = frozenset(
    {
        "align-content",
        "align-items",
        "align-self",
        "clear",
        "clip",
        "column-gap",
        "cursor",
        "direction",
        "display",
        "flex",
        "flex-basis",
        "flex-direction",
        "flex-flow",
        "flex-grow",
        "flex-shrink",
        "flex-wrap",
        "float",
        "gap",
        "height",
        "justify-content",
        "justify-items",
        "justify-self",
        "left",
        "max-height",
        "max-width",
        "min-height",
        "min-width",
        "order",
        "overflow",
        "overflow-x",
        "overflow-y",
        "place-content",
        "place-items",
        "place-self",
        "position",
        "right",
        "row-gap",
        "table-layout",
        "top",
        "vertical-align",
        "visibility",
        "width",
        "z-index",
        "zoom",
    }
)

# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

_GRID: frozenset[str] = frozenset(
    {
        "grid",
        "grid-area",
        "grid-auto-columns",
        "grid-auto-flow",
        "grid-auto-rows",
        "grid-column",
        "grid-column-end",
        "grid-column-gap",
        "grid-column-start",
        "grid-gap",
        "grid-row",
        "grid-row-end",
        "grid-row-gap",
        "grid-row-start",
        "grid-template",
        "grid-template-areas",
        "grid-template-columns",
        "grid-template-rows",
    }
)

# ---------------------------------------------------------------------------
# Background & border
# ---------------------------------------------------------------------------

_BACKGROUND: frozenset[str] = frozenset(
    {
        "background",
        "background-attachment",
        "background-color",
        "background-image",
        "background-position",
        "background-position-x",
        "background-position-y",
        "background-repeat",
    }
)

_BORDER: frozenset[str] = frozenset(
    {
        "border",
        "border-bottom",
        "border-bottom-color",
        "border-bottom-style",
        "border-bottom-width",
        "border-collapse",
        "border-color",
        "border-left",
        "border-left-color",
        "border-left-style",
        "border-left-width",
        "border-radius",
        "border-right",
        "border-right-color",
        "border-right-style",
        "border-right-width",
        "border-spacing",
        "border-style",
        "border-top",
        "border-top-color",
        "border-top-style",
        "border-top-width",
        "border-width",
    }
)

# ---------------------------------------------------------------------------
# Text, fonts, lists
# ---------------------------------------------------------------------------

_TEXT: frozenset[str] = frozenset(
    {
        "color",
        "font",
        "font-family",
        "font-size",
        "font-stretch",
        "font-style",
        "font-variant",
        "font-width",
        "line-height",
        "list-style",
        "list-style-image",
        "list-style-position",
        "list-style-type",
        "text-align",
        "text-decoration",
        "text-indent",
        "white-space",
    }
)

# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------

_SPACING: frozenset[str] = frozenset(
    {
        "margin",
        "margin-bottom",
        "margin-left",
        "margin-offset",
        "margin-right",
        "margin-top",
        "padding",
        "padding-bottom",
        "padding-left",
        "padding-right",
        "padding-top",
    }
)

ALLOWED_CSS_PROPERTIES: frozenset[str] = (
    _LAYOUT | _GRID | _BACKGROUND | _BORDER | _TEXT | _SPACING
)
