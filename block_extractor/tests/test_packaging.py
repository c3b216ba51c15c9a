"""Tests for the package metadata in pyproject.toml."""

from pathlib import Path

import pytest

from block_extractor import __version__
from block_extractor.infrastructure.plugin_registry import PluginRegistry

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@pytest.fixture(scope="module")
def project():
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


class TestProjectMetadata:

    def test_version_matches_package(self, project):
        assert project["version"] == __version__

    def test_no_readme_declared(self, project):
        assert "readme" not in project

    def test_memory_store_entry_point(self, project):
        stores = project["entry-points"][PluginRegistry.STORE_GROUP]
        assert stores["memory"] == "block_extractor.adapters.store.memory_store:InMemoryGeometryStore"
