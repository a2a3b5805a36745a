"""
MongoDB query operator table.

A single frozen table of symbolic names for the ``$``-prefixed operator
tokens MongoDB understands, so query documents can be written without
hard-coded string literals::

    from mongo_query_operators import QueryOperators as Q

    query = {
        "age": {Q.GreaterThanOrEqual: 18, Q.LessThan: 65},
        Q.Or: [{"status": "active"}, {"status": {Q.Exists: False}}],
    }

Every field is typed as the ``Literal`` of its token, so the model is both
the runtime value and the type declaration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import OperatorNotFoundError

_logger = logging.getLogger(__name__)

_NESTED = "TextOperators"


class TextOperatorTable(BaseModel):
    """Modifiers accepted inside a ``$text`` expression."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    Search: Literal["$search"] = Field(
        "$search", description="Terms to search for in the text index."
    )
    Language: Literal["$language"] = Field(
        "$language",
        description="Language that drives stop words, stemming and tokenizing.",
    )
    CaseSensitive: Literal["$caseSensitive"] = Field(
        "$caseSensitive", description="Enables or disables case-sensitive search."
    )
    DiacriticSensitive: Literal["$diacriticSensitive"] = Field(
        "$diacriticSensitive",
        description="Enables or disables diacritic-sensitive search.",
    )


class QueryOperatorTable(BaseModel):
    """Symbolic names for MongoDB query operators.

    Use the module-level ``QueryOperators`` instance rather than building
    new tables. Fields declare their token as a literal type, so a table
    can never hold anything else.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Comparison
    Equal: Literal["$eq"] = Field(
        "$eq", description="Matches values equal to a given value."
    )
    NotEqual: Literal["$ne"] = Field(
        "$ne", description="Matches values not equal to a given value."
    )
    GreaterThan: Literal["$gt"] = Field(
        "$gt", description="Matches values greater than a given value."
    )
    GreaterThanOrEqual: Literal["$gte"] = Field(
        "$gte", description="Matches values greater than or equal to a given value."
    )
    LessThan: Literal["$lt"] = Field(
        "$lt", description="Matches values less than a given value."
    )
    LessThanOrEqual: Literal["$lte"] = Field(
        "$lte", description="Matches values less than or equal to a given value."
    )
    In: Literal["$in"] = Field(
        "$in", description="Matches any of the values in an array."
    )
    NotIn: Literal["$nin"] = Field(
        "$nin", description="Matches none of the values in an array."
    )

    # Element and evaluation
    Exists: Literal["$exists"] = Field(
        "$exists", description="Matches documents that have (or lack) a field."
    )
    Type: Literal["$type"] = Field(
        "$type", description="Matches fields holding a given BSON type."
    )
    Modulus: Literal["$mod"] = Field(
        "$mod",
        description="Matches fields whose value modulo a divisor equals a remainder.",
    )
    Regex: Literal["$regex"] = Field(
        "$regex", description="Matches string fields against a regular expression."
    )
    Text: Literal["$text"] = Field(
        "$text", description="Runs a full-text search against the text index."
    )
    TextOperators: TextOperatorTable = Field(
        default_factory=TextOperatorTable,
        description="Modifiers used inside a $text expression.",
    )
    Where: Literal["$where"] = Field(
        "$where", description="Matches documents satisfying a JavaScript expression."
    )

    # Array
    Size: Literal["$size"] = Field(
        "$size", description="Matches arrays with a given number of elements."
    )
    All: Literal["$all"] = Field(
        "$all", description="Matches arrays containing every given element."
    )
    ElemMatch: Literal["$elemMatch"] = Field(
        "$elemMatch",
        description="Matches arrays with at least one element meeting every condition.",
    )

    # Logical
    Not: Literal["$not"] = Field(
        "$not", description="Inverts the effect of an operator expression."
    )
    Nor: Literal["$nor"] = Field(
        "$nor", description="Matches documents failing every clause."
    )
    Or: Literal["$or"] = Field(
        "$or", description="Matches documents satisfying at least one clause."
    )
    And: Literal["$and"] = Field(
        "$and", description="Matches documents satisfying every clause."
    )

    # Geospatial
    GeoWithin: Literal["$geoWithin"] = Field(
        "$geoWithin", description="Matches geometries entirely within a shape."
    )
    GeoIntersects: Literal["$geoIntersects"] = Field(
        "$geoIntersects", description="Matches geometries intersecting a shape."
    )
    Near: Literal["$near"] = Field(
        "$near", description="Sorts geospatial objects by proximity to a point."
    )
    NearSphere: Literal["$nearSphere"] = Field(
        "$nearSphere",
        description="Sorts geospatial objects by spherical proximity to a point.",
    )
    Geometry: Literal["$geometry"] = Field(
        "$geometry", description="GeoJSON shape used by geospatial operators."
    )
    CenterSphere: Literal["$centerSphere"] = Field(
        "$centerSphere",
        description="Circle on a sphere used by $geoWithin (radius in radians).",
    )
    Box: Literal["$box"] = Field(
        "$box", description="Rectangle on flat coordinates used by $geoWithin."
    )
    Polygon: Literal["$polygon"] = Field(
        "$polygon", description="Polygon on flat coordinates used by $geoWithin."
    )
    UniqueDocs: Literal["$uniqueDocs"] = Field(
        "$uniqueDocs",
        description="Returns each matching document once in legacy geospatial queries.",
    )

    # Query comment
    Comment: Literal["$comment"] = Field(
        "$comment", description="Attaches a comment to a query for profiling and logs."
    )

    def lookup(self, name: str) -> str | TextOperatorTable:
        """Resolve *name* (or a dotted path like ``TextOperators.Search``) to its token.

        Raises:
            OperatorNotFoundError: If *name* is not part of the table.
        """
        owner, field = self._resolve(name)
        value: str | TextOperatorTable = getattr(owner, field)
        return value

    def describe(self, name: str) -> str:
        """Return the one-line documentation of operator *name*."""
        owner, field = self._resolve(name)
        return type(owner).model_fields[field].description or ""

    def as_mapping(self) -> Mapping[str, str | Mapping[str, str]]:
        """Read-only mapping view, nested table included, in declaration order."""
        view: dict[str, str | Mapping[str, str]] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, TextOperatorTable):
                view[name] = MappingProxyType(value.model_dump())
            else:
                view[name] = value
        return MappingProxyType(view)

    def to_dict(self) -> dict[str, object]:
        """Plain JSON-serializable copy of the table."""
        return self.model_dump()

    def _resolve(self, name: str) -> tuple[BaseModel, str]:
        owner: BaseModel = self
        field = name
        head, dot, tail = name.partition(".")
        if dot and head == _NESTED:
            owner, field = self.TextOperators, tail
        if field not in type(owner).model_fields:
            _logger.debug("Unknown query operator name %r", name)
            raise OperatorNotFoundError(name, self._known_names())
        return owner, field

    @classmethod
    def _known_names(cls) -> list[str]:
        names = list(cls.model_fields)
        names.extend(f"{_NESTED}.{sub}" for sub in TextOperatorTable.model_fields)
        return names


QueryOperators = QueryOperatorTable()
