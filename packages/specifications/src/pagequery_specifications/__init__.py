from .ast import Comparison, ConditionFactory
from .base import Always, And, BaseCondition, conjoin
from .builder import ConditionBuilder, is_absent
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    ConditionError,
    FieldNotAllowedError,
    OperatorNotFoundError,
    UnsupportedOperatorError,
    ValidationError,
)
from .operators import COMPARISON_OPERATORS, ConditionOperator
from .operators_memory import build_default_registry
from .registry import OperatorRegistry

__all__ = [
    # Core types
    "ConditionOperator",
    "COMPARISON_OPERATORS",
    "Comparison",
    "ConditionFactory",
    "BaseCondition",
    "Always",
    "And",
    "conjoin",
    # Builder
    "ConditionBuilder",
    "is_absent",
    # Evaluator / strategy
    "OperatorRegistry",
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Exceptions
    "ConditionError",
    "ValidationError",
    "OperatorNotFoundError",
    "FieldNotAllowedError",
    "UnsupportedOperatorError",
]
