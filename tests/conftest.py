"""Shared pytest fixtures for ipmetaindex tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ipmetaindex.settings import IndexSettings  # noqa: E402

from tests.fixtures.geolite2_fixtures import write_geolite2_tree  # noqa: E402


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep IPMETA_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("IPMETA_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Empty scratch directory for downloads and extraction."""
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def index_settings(scratch_dir: Path) -> IndexSettings:
    """Settings pointing at the scratch directory, with a dummy license key and short timeouts."""
    return IndexSettings(
        maxmind_license_key="test-license-key",
        scratch_dir=scratch_dir,
        request_timeout=5,
        task_timeout=30,
        retries=0,
    )


@pytest.fixture
def geolite2_dir(tmp_path: Path) -> Path:
    """Flat directory holding the fixture GeoLite2 tables."""
    return write_geolite2_tree(tmp_path / "geolite2")
