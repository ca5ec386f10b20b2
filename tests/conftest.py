"""
Pytest configuration for the component build tests

Provides component-file factories and a throwaway project layout
(components/, template, dist/) under tmp_path.
"""

from pathlib import Path

import pytest

from canvascomponents.observability.telemetry import reset_counters, reset_latencies
from tests.fixtures.sample_components import BANNER_COMPONENT, CARD_COMPONENT, TEMPLATE


@pytest.fixture(autouse=True)
def reset_telemetry():
    """Start every test with empty counters and timings"""
    reset_counters()
    reset_latencies()
    yield


@pytest.fixture
def write_component(tmp_path):
    """Factory: write a component file under tmp_path/components and return its path"""

    def _write(filename: str, content: str) -> Path:
        directory = tmp_path / "components"
        directory.mkdir(exist_ok=True)
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project(tmp_path, write_component):
    """A buildable project: two components plus the template script"""
    write_component("card.html", CARD_COMPONENT)
    write_component("banner.html", BANNER_COMPONENT)
    (tmp_path / "canvascomponents.js").write_text(TEMPLATE, encoding="utf-8")
    return tmp_path


@pytest.fixture(scope="session")
def repo_root():
    """Return the repository root (holds components/ and canvascomponents.js)"""
    return Path(__file__).resolve().parent.parent
