"""
Operator-table exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``QueryOperatorsError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class QueryOperatorsError(Exception):
    """Base exception for all operator-table errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class OperatorNotFoundError(QueryOperatorsError, KeyError):
    """
    Unknown operator name passed to ``lookup`` or ``describe``.

    Provides fuzzy-matched suggestions for likely intended names and lists
    the names known at the same level as the requested one, so a miss under
    ``TextOperators.`` shows the text modifiers rather than the whole table.
    Subclasses ``KeyError`` so plain mapping-style handlers still catch it.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)
        self.scope = operator.rpartition(".")[0]
        scoped = [n for n in valid_operators if n.rpartition(".")[0] == self.scope]
        if not scoped:
            # path through a name that holds no nested table
            self.scope = ""
        self.siblings = scoped or list(valid_operators)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        where = f" under '{self.scope}'" if self.scope else ""
        message += f" Known names{where}: {', '.join(self.siblings)}."
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "known_names": self.siblings,
            "valid_operators": sorted(self.valid_operators),
        }
