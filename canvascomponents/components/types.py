"""
Module: types
Purpose: Shared types for the component pipeline.
Dependencies: pydantic (config validation only)

ComponentSource is what the parser produces; Component is what the processor
hands to the assembler. Keeping both in a leaf module lets parser, processor
and build import them without importing each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ComponentConfig(BaseModel):
    """Metadata from a component's ``<config>`` block.

    Only ``name`` is required. Any other keys (description, icon, ...) are
    accepted and end up in the bundled record unchanged.
    """

    model_config = ConfigDict(extra="allow")

    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


@dataclass
class ComponentSource:
    """The four sections of a component file, before minification."""

    filename: str
    config: dict[str, Any]
    style: str = ""
    script: str = ""
    markup: str = ""

    @property
    def name(self) -> str:
        return str(self.config["name"])


@dataclass
class Component:
    """A fully processed component, ready to be bundled."""

    name: str
    filename: str
    record: dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        """Lookup key in the bundled components object."""
        return self.name.lower()
