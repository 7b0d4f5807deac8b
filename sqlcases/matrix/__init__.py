"""Test matrix expansion for parameterized test runners."""
from sqlcases.matrix.expander import MatrixEntry, applicable_dialects, expand_test_matrix

__all__ = ["MatrixEntry", "applicable_dialects", "expand_test_matrix"]
