from .exceptions import OperatorNotFoundError, QueryOperatorsError
from .table import QueryOperatorTable, QueryOperators, TextOperatorTable

__all__ = [
    # Table
    "QueryOperators",
    "QueryOperatorTable",
    "TextOperatorTable",
    # Exceptions
    "QueryOperatorsError",
    "OperatorNotFoundError",
]
