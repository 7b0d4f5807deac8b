"""Unit tests for case and assertion document parsing."""
from __future__ import annotations

import io
from enum import Enum

import pytest

from sqlcases.errors import CorpusParseError, UnknownDialectError
from sqlcases.load.parser import parse_sql_asserts, parse_sql_cases
from sqlcases.schema.case import SQLCase
from tests.fixtures import RESOURCES_DIR, sql_cases_xml


def _stream(text: str) -> io.BytesIO:
    return io.BytesIO(text.encode("utf-8"))


def test_parses_cases_in_document_order():
    doc = sql_cases_xml(
        ("b", "SELECT %s"),
        ("a", "SELECT 1", "MySQL,Oracle"),
    )
    cases = parse_sql_cases(_stream(doc)).sql_cases
    assert [c.id for c in cases] == ["b", "a"]
    assert cases[0].database_types is None
    assert cases[1].database_types == "MySQL,Oracle"
    assert cases[1].dialect_names == ("MySQL", "Oracle")


def test_value_keeps_escapes_and_xml_entities():
    doc = sql_cases_xml(("c", "SELECT * FROM t WHERE a &lt;= %s AND b LIKE 'x%%'"))
    case = parse_sql_cases(_stream(doc)).sql_cases[0]
    assert case.value == "SELECT * FROM t WHERE a <= %s AND b LIKE 'x%%'"


def test_empty_document_has_no_cases():
    assert parse_sql_cases(_stream("<sql-cases/>")).sql_cases == []


def test_dialect_names_are_stripped_and_deduplicated():
    case = SQLCase.model_validate(
        {"id": "x", "value": "SELECT 1", "database-types": " MySQL, Oracle,,MySQL "}
    )
    assert case.dialect_names == ("MySQL", "Oracle")


@pytest.mark.parametrize(
    "doc",
    [
        "<sql-cases><sql-case id='a' value='SELECT 1'></sql-cases>",
        "<sql-asserts />",
        "<sql-cases><case id='a' value='SELECT 1' /></sql-cases>",
        "<sql-cases><sql-case value='SELECT 1' /></sql-cases>",
        "<sql-cases><sql-case id='a' /></sql-cases>",
        "<sql-cases><sql-case id='' value='SELECT 1' /></sql-cases>",
        "<sql-cases><sql-case id='a' value='SELECT 1' dialect='MySQL' /></sql-cases>",
        "<sql-cases><sql-case id='a' value='SELECT 1'><x /></sql-case></sql-cases>",
        "",
    ],
    ids=[
        "malformed",
        "wrong-root",
        "wrong-child",
        "missing-id",
        "missing-value",
        "empty-id",
        "unknown-attribute",
        "child-element",
        "empty-stream",
    ],
)
def test_off_schema_documents_are_fatal(doc):
    with pytest.raises(CorpusParseError) as info:
        parse_sql_cases(_stream(doc), "bad.xml")
    assert info.value.resource == "bad.xml"


def test_parses_assertion_fixtures():
    with (RESOURCES_DIR / "asserts" / "select.xml").open("rb") as stream:
        asserts = parse_sql_asserts(stream).sql_asserts
    first, second = asserts
    assert first.id == "assert_select_equals"
    assert first.dialect_names == ("MySQL", "H2")
    rules = first.sharding_rule_assertions
    assert rules is not None
    assert rules.tag == "sharding-rule-assertions"
    rule = rules.find("sharding-rule-assertion")
    assert rule is not None
    assert rule.attributes == {"expected": "t_order_1"}
    assert rule.find_all("table-rule")[0].attributes["logic-table"] == "t_order"
    assert second.types is None
    assert second.sharding_rule_assertions is None


def test_assertion_types_are_validated_eagerly():
    doc = "<sql-asserts><sql-assert id='a' sql='SELECT 1' types='MySQL,Fake' /></sql-asserts>"
    with pytest.raises(UnknownDialectError) as info:
        parse_sql_asserts(_stream(doc))
    assert info.value.literal == "Fake"
    assert info.value.case_id == "a"


def test_assertion_types_use_caller_enum():
    class Engine(Enum):
        Fake = "fake"

    doc = "<sql-asserts><sql-assert id='a' sql='SELECT 1' types='Fake' /></sql-asserts>"
    assert parse_sql_asserts(_stream(doc), enum_type=Engine).sql_asserts[0].types == "Fake"


def test_assertion_rejects_unknown_child():
    doc = "<sql-asserts><sql-assert id='a' sql='SELECT 1'><other /></sql-assert></sql-asserts>"
    with pytest.raises(CorpusParseError):
        parse_sql_asserts(_stream(doc))
