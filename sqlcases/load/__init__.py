"""Corpus discovery, parsing and indexing."""
from sqlcases.load.asserts import AssertParameter, load_assert_parameters
from sqlcases.load.corpus import SQLCaseCorpus, build_corpus
from sqlcases.load.parser import parse_sql_asserts, parse_sql_cases
from sqlcases.load.sources import (
    ArchiveSource,
    DirectorySource,
    Resource,
    ResourceSource,
    probe_source,
)

__all__ = [
    "AssertParameter",
    "load_assert_parameters",
    "SQLCaseCorpus",
    "build_corpus",
    "parse_sql_asserts",
    "parse_sql_cases",
    "ArchiveSource",
    "DirectorySource",
    "Resource",
    "ResourceSource",
    "probe_source",
]
