# geometry/__init__.py
from .cartesian import ArrayPointOps, Cartesian2, Cartesian3
from .math_utils import EPSILON7, EPSILON10, EPSILON14, equals_epsilon
from .remove_duplicates import REMOVE_DUPLICATES_EPSILON, ValueOps, remove_duplicates

__all__ = [
    # Duplicate removal
    "remove_duplicates",
    "REMOVE_DUPLICATES_EPSILON",
    "ValueOps",
    # Value types
    "Cartesian2",
    "Cartesian3",
    "ArrayPointOps",
    # Math
    "equals_epsilon",
    "EPSILON7",
    "EPSILON10",
    "EPSILON14",
]
