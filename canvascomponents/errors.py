"""Exception hierarchy for the component build.

Library code raises these; only the CLI turns them into log lines and an
exit status.
"""

from __future__ import annotations


class CanvasComponentsError(Exception):
    """Base class for every error the build raises on purpose."""

    pass


class ComponentError(CanvasComponentsError):
    """A single component file could not be parsed, validated or minified."""

    def __init__(self, message: str, filename: str | None = None):
        self.filename = filename
        self.message = message
        super().__init__(f"Error in {filename}: {message}" if filename else message)


class StyleError(ComponentError):
    """Malformed CSS (unbalanced braces, unterminated comment or string)."""

    pass


class UnsupportedPropertyError(StyleError):
    """A CSS property outside the Canvas allow-list."""

    def __init__(self, property_name: str, filename: str | None = None):
        self.property_name = property_name
        super().__init__(
            f"CSS property '{property_name}' is not supported by Canvas. "
            "It will be automatically stripped by their sanitizer.",
            filename,
        )


class ScriptError(ComponentError):
    """Malformed JavaScript found while minifying."""

    def __init__(self, message: str, line: int | None = None, filename: str | None = None):
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message, filename)


class BuildError(CanvasComponentsError):
    """The build as a whole failed (discovery, assembly, output)."""

    pass
