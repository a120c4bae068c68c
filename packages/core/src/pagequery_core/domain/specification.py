"""Condition protocol consumed by data sources."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ICondition(Protocol):
    """
    Protocol for a composable boolean filter.

    The concrete tree (``Always`` / ``Comparison`` / ``And``) lives in the
    specifications package; core and its adapters only rely on this shape.
    """

    def is_satisfied_by(self, candidate: Any) -> bool:
        """
        Check the condition against a candidate row.
        Used by in-memory data sources.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return the serialized condition tree.
        Compiled by relational data sources into a WHERE clause.
        """
        ...

    def referenced_fields(self) -> frozenset[str]:
        """Return every field path the condition reads."""
        ...
