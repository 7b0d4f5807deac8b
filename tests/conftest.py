"""Shared pytest fixtures for sqlcases tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from sqlcases.config import CorpusConfig
from sqlcases.load.corpus import SQLCaseCorpus, build_corpus
from sqlcases.load.sources import DirectorySource
from sqlcases.loader import SQLCasesLoader
from tests.fixtures import RESOURCES_DIR, pack_archive


@pytest.fixture(scope="session")
def loader() -> SQLCasesLoader:
    """Loader over the well-formed fixture corpus."""
    return SQLCasesLoader(CorpusConfig(root=RESOURCES_DIR))


@pytest.fixture(scope="session")
def supported_corpus() -> SQLCaseCorpus:
    """The ``sql`` category of the fixture corpus."""
    return build_corpus(DirectorySource(RESOURCES_DIR), "sql")


@pytest.fixture()
def archive(tmp_path: Path) -> Path:
    """The fixture corpus packed into a zip under ``resources/``."""
    return pack_archive(RESOURCES_DIR, tmp_path / "cases.zip", base="resources")
