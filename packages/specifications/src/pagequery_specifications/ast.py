from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .base import Always, BaseCondition, conjoin
from .exceptions import FieldNotAllowedError, OperatorNotFoundError, ValidationError
from .operators import COMPARISON_OPERATORS, ConditionOperator

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from .evaluator import MemoryOperatorRegistry

_VALID_COMPARISONS: frozenset[str] = frozenset(m.value for m in COMPARISON_OPERATORS)
_VALID_OPERATORS: list[str] = [m.value for m in ConditionOperator]


class Comparison(BaseCondition):
    """
    Leaf condition comparing one field path against a value.

    Delegates in-memory evaluation to a :class:`MemoryOperatorRegistry`
    (strategy pattern). The registry MUST be provided explicitly.
    """

    def __init__(
        self,
        field: str,
        op: ConditionOperator | str,
        value: Any,
        *,
        registry: MemoryOperatorRegistry,
    ) -> None:
        self.field = field
        try:
            self.op = ConditionOperator(op)
        except ValueError as exc:
            raise OperatorNotFoundError(str(op), sorted(_VALID_COMPARISONS)) from exc
        if self.op not in COMPARISON_OPERATORS:
            raise OperatorNotFoundError(self.op.value, sorted(_VALID_COMPARISONS))
        self.value = value
        if registry is None:
            raise ValueError(
                "registry parameter is required. "
                "Use build_default_registry() from operators_memory to create one."
            )
        self._registry = registry

    def is_satisfied_by(self, candidate: Any) -> bool:
        actual_val = self._resolve_field(candidate, self.field)
        return self._registry.evaluate(self.op, actual_val, self.value)

    def referenced_fields(self) -> frozenset[str]:
        return frozenset({self.field})

    @staticmethod
    def _resolve_field(obj: Any, path: str) -> Any:
        """
        Resolve a dot-separated path on *obj*.

        Works on nested dicts (``{"team": {"name": ...}}``) and on plain
        objects alike; a missing link anywhere yields ``None``.
        """
        for part in path.split("."):
            if obj is None:
                return None
            obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
        return obj

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "attr": self.field,
            "val": self.value,
        }


class ConditionFactory:
    """
    Rebuild condition trees from their serialized form.

    The accepted shape is exactly what ``to_dict()`` produces::

        {"op": "always"}
        {"op": ">=", "attr": "member.age", "val": 50}
        {"op": "and", "conditions": [<node>, <node>, ...]}

    ``and`` nodes may carry any number of children; they are folded
    left-to-right into binary :class:`And` nodes.
    """

    @staticmethod
    def from_dict(
        data: dict[str, Any],
        *,
        allowed_fields: Sequence[str] | None = None,
        registry: MemoryOperatorRegistry,
    ) -> BaseCondition:
        """
        Build a condition tree, raising the first structural problem found.

        Args:
            data: The serialized condition.
            allowed_fields: Optional whitelist of field paths; an ``attr``
                outside it raises :class:`FieldNotAllowedError`.
            registry: Injected into every :class:`Comparison` leaf.
        """
        for problem in _problems(data, "<root>", allowed_fields):
            raise problem
        return _build(data, registry)

    @staticmethod
    def from_json(
        text: str,
        *,
        allowed_fields: Sequence[str] | None = None,
        registry: MemoryOperatorRegistry,
    ) -> BaseCondition:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid JSON: {exc}", path="<root>") from exc
        if not isinstance(data, dict):
            raise ValidationError("Top-level JSON value must be an object", path="<root>")
        return ConditionFactory.from_dict(
            data, allowed_fields=allowed_fields, registry=registry
        )

    @staticmethod
    def validate(
        data: Any,
        *,
        allowed_fields: Sequence[str] | None = None,
    ) -> list[str]:
        """Every problem as ``"<path>: <message>"``; empty when the tree is valid."""
        return [
            f"{problem.path}: {problem}"
            for problem in _problems(data, "<root>", allowed_fields)
        ]


def _build(data: dict[str, Any], registry: MemoryOperatorRegistry) -> BaseCondition:
    op = data["op"].lower()
    if op == ConditionOperator.ALWAYS:
        return Always()
    if op == ConditionOperator.AND:
        result: BaseCondition = Always()
        for child in data["conditions"]:
            result = conjoin(result, _build(child, registry))
        return result
    return Comparison(data["attr"], op, data.get("val"), registry=registry)


def _problems(
    data: Any,
    path: str,
    allowed_fields: Sequence[str] | None,
) -> Iterator[ValidationError | OperatorNotFoundError]:
    """Yield the structural problems of one node and its children, in order."""
    if not isinstance(data, dict):
        yield ValidationError(f"Expected an object, got {type(data).__name__}", path=path)
        return

    op = data.get("op")
    if not op or not isinstance(op, str):
        yield ValidationError("Missing or empty 'op' key", path=path)
        return
    op = op.lower()

    if op == ConditionOperator.ALWAYS:
        return
    if op == ConditionOperator.AND:
        children = data.get("conditions")
        if not children or not isinstance(children, list):
            yield ValidationError("'and' requires a non-empty 'conditions' list", path=path)
            return
        for idx, child in enumerate(children):
            yield from _problems(child, f"{path}.conditions[{idx}]", allowed_fields)
        return

    if op not in _VALID_COMPARISONS:
        yield OperatorNotFoundError(op, _VALID_OPERATORS, path=path)

    attr = data.get("attr")
    if not attr or not isinstance(attr, str):
        yield ValidationError("Comparison is missing 'attr'", path=path)
    elif allowed_fields is not None and attr not in allowed_fields:
        yield FieldNotAllowedError(attr, list(allowed_fields), path=path)
