"""Unit tests for corpus building and lookup."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from sqlcases.errors import CaseNotFoundError, CorpusParseError, DuplicateCaseError
from sqlcases.load.corpus import SQLCaseCorpus, build_corpus
from sqlcases.load.sources import ArchiveSource, DirectorySource
from sqlcases.schema.case import SQLCase
from tests.fixtures import BROKEN_DIR, DUPLICATES_DIR, RESOURCES_DIR, SUPPORTED_IDS


def _contents(corpus: SQLCaseCorpus) -> dict[str, tuple[str, str | None]]:
    return {k: (v.value, v.database_types) for k, v in corpus.items()}


def test_build_merges_all_files_ordered_by_id(supported_corpus: SQLCaseCorpus):
    assert list(supported_corpus) == SUPPORTED_IDS
    assert supported_corpus.name == "sql"


def test_lookup(supported_corpus: SQLCaseCorpus):
    case = supported_corpus.lookup("select_like")
    assert case.value == "SELECT * FROM t_order WHERE status LIKE 'init%%' AND user_id = %s"
    assert supported_corpus.get_database_types("select_like") == "MySQL,Oracle"
    assert supported_corpus.get_database_types("select_by_id") is None


def test_lookup_unknown_id_names_it(supported_corpus: SQLCaseCorpus):
    with pytest.raises(CaseNotFoundError) as info:
        supported_corpus.lookup("no_such_case")
    assert info.value.case_id == "no_such_case"
    assert str(info.value) == "Can't find SQL of id: no_such_case"


def test_mapping_protocol(supported_corpus: SQLCaseCorpus):
    assert "select_by_id" in supported_corpus
    assert "no_such_case" not in supported_corpus
    assert supported_corpus.get("no_such_case") is None
    assert len(supported_corpus) == 4


def test_corpus_is_read_only(supported_corpus: SQLCaseCorpus):
    with pytest.raises(TypeError):
        supported_corpus["new"] = SQLCase(id="new", value="SELECT 1")  # type: ignore[index]


def test_corpus_copies_its_input():
    cases = {"a": SQLCase(id="a", value="SELECT 1")}
    corpus = SQLCaseCorpus(cases)
    cases["b"] = SQLCase(id="b", value="SELECT 2")
    assert list(corpus) == ["a"]


def test_missing_category_builds_empty_corpus(tmp_path: Path):
    corpus = build_corpus(DirectorySource(tmp_path), "sql")
    assert len(corpus) == 0


def test_malformed_document_aborts_build():
    with pytest.raises(CorpusParseError):
        build_corpus(DirectorySource(BROKEN_DIR), "sql")


def test_duplicate_ids_overwrite_by_default():
    corpus = build_corpus(DirectorySource(DUPLICATES_DIR), "sql")
    assert list(corpus) == ["select_twice"]
    # files are processed in name order, so b.xml is read last
    assert corpus["select_twice"].value == "SELECT 'b'"


def test_duplicate_ids_raise_in_strict_mode():
    with pytest.raises(DuplicateCaseError) as info:
        build_corpus(DirectorySource(DUPLICATES_DIR), "sql", strict_duplicates=True)
    assert info.value.case_id == "select_twice"
    assert info.value.resource is not None and info.value.resource.endswith("b.xml")


def test_build_is_idempotent(supported_corpus: SQLCaseCorpus):
    rebuilt = build_corpus(DirectorySource(RESOURCES_DIR), "sql")
    assert _contents(rebuilt) == _contents(supported_corpus)


def test_concurrent_builds_agree(supported_corpus: SQLCaseCorpus):
    source = DirectorySource(RESOURCES_DIR)
    with ThreadPoolExecutor(max_workers=8) as pool:
        corpora = list(pool.map(lambda _: build_corpus(source, "sql"), range(16)))
    expected = _contents(supported_corpus)
    assert all(_contents(c) == expected for c in corpora)


def test_archive_and_directory_builds_agree(archive: Path, supported_corpus: SQLCaseCorpus):
    packed = build_corpus(ArchiveSource(archive, "resources"), "sql")
    assert _contents(packed) == _contents(supported_corpus)
