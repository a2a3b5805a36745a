"""Shared fixtures for operator-table tests."""

from __future__ import annotations

import pytest

from mongo_query_operators import QueryOperatorTable, QueryOperators


@pytest.fixture
def table() -> QueryOperatorTable:
    """The process-wide operator table."""
    return QueryOperators
