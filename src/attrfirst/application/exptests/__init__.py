"""Built-in expression tests and the test registry.

Usage:
    from attrfirst.application.exptests import default_exp_tests

    registry = default_exp_tests(frozen=False)
    registry.register(MyTest())
    registry.freeze()
"""

from attrfirst.application.exptests._base import BaseExpTest
from attrfirst.application.exptests._registry import ExpTestRegistry, default_exp_tests
from attrfirst.application.exptests.comparison import (
    IsContaining,
    IsDivisibleBy,
    IsEqualTo,
    IsEven,
    IsGreaterThan,
    IsGreaterThanOrEqual,
    IsIn,
    IsLessThan,
    IsLessThanOrEqual,
    IsNotEqualTo,
    IsOdd,
    IsSameAs,
)
from attrfirst.application.exptests.truthiness import (
    IsDefined,
    IsFalsy,
    IsNone,
    IsTruthy,
    IsUndefined,
)
from attrfirst.application.exptests.type_tests import (
    IsIterable,
    IsLower,
    IsMapping,
    IsNumber,
    IsSequence,
    IsString,
    IsUpper,
)

__all__ = [
    "BaseExpTest",
    "ExpTestRegistry",
    "default_exp_tests",
    # Truthiness
    "IsTruthy",
    "IsFalsy",
    "IsDefined",
    "IsUndefined",
    "IsNone",
    # Types
    "IsString",
    "IsNumber",
    "IsMapping",
    "IsIterable",
    "IsSequence",
    "IsLower",
    "IsUpper",
    # Comparison
    "IsEqualTo",
    "IsNotEqualTo",
    "IsLessThan",
    "IsLessThanOrEqual",
    "IsGreaterThan",
    "IsGreaterThanOrEqual",
    "IsSameAs",
    "IsContaining",
    "IsIn",
    "IsDivisibleBy",
    "IsEven",
    "IsOdd",
]
