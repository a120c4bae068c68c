from enum import Enum


class ConditionOperator(str, Enum):
    """Operators a condition tree can carry."""

    # Comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Tree nodes
    AND = "and"
    ALWAYS = "always"


COMPARISON_OPERATORS: frozenset[ConditionOperator] = frozenset(
    {
        ConditionOperator.EQ,
        ConditionOperator.NE,
        ConditionOperator.GT,
        ConditionOperator.LT,
        ConditionOperator.GE,
        ConditionOperator.LE,
    }
)
