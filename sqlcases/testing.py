"""pytest helpers for running a test once per test-matrix row.

Usage::

    from sqlcases import DatabaseType, default_loader
    from sqlcases.testing import parametrize_sql_cases

    @parametrize_sql_cases(
        default_loader().get_supported_test_parameters(list(DatabaseType), DatabaseType)
    )
    def test_parse(case_id, database_type, case_type):
        sql = default_loader().get_supported_sql(case_id, case_type, [1])
        ...
"""
from __future__ import annotations

from collections.abc import Iterable

import pytest

from sqlcases.matrix.expander import MatrixEntry

#: Argument names the decorated test receives.
MATRIX_ARGNAMES = ("case_id", "database_type", "case_type")


def parametrize_sql_cases(entries: Iterable[MatrixEntry]) -> pytest.MarkDecorator:
    """Return a ``pytest.mark.parametrize`` decorator over ``entries``.

    Each row gets the id ``<case_id>-<database type>-<variant>``.
    """
    entries = list(entries)
    return pytest.mark.parametrize(
        MATRIX_ARGNAMES,
        [tuple(e) for e in entries],
        ids=[e.param_id for e in entries],
    )
