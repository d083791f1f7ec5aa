from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from polyline_cleanup.errors import InvalidArgumentError

from .math_utils import equals_epsilon


@dataclass
class Cartesian2:
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def clone(
        cartesian: Optional["Cartesian2"], result: Optional["Cartesian2"] = None
    ) -> Optional["Cartesian2"]:
        """Copy a point, into result when one is given."""
        if cartesian is None:
            return None
        if result is None:
            return Cartesian2(cartesian.x, cartesian.y)

        result.x = cartesian.x
        result.y = cartesian.y
        return result

    @staticmethod
    def equals_epsilon(
        left: Optional["Cartesian2"],
        right: Optional["Cartesian2"],
        absolute_epsilon: float,
        relative_epsilon: Optional[float] = None,
    ) -> bool:
        """Componentwise comparison within the given tolerances."""
        if left is right:
            return True
        if left is None or right is None:
            return False
        return equals_epsilon(
            left.x, right.x, absolute_epsilon, relative_epsilon
        ) and equals_epsilon(left.y, right.y, absolute_epsilon, relative_epsilon)

    @classmethod
    def from_array(cls, array: Sequence[float], start_index: int = 0) -> "Cartesian2":
        if array is None:
            raise InvalidArgumentError("array is required.")
        return cls(float(array[start_index]), float(array[start_index + 1]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass
class Cartesian3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def clone(
        cartesian: Optional["Cartesian3"], result: Optional["Cartesian3"] = None
    ) -> Optional["Cartesian3"]:
        """Copy a point, into result when one is given."""
        if cartesian is None:
            return None
        if result is None:
            return Cartesian3(cartesian.x, cartesian.y, cartesian.z)

        result.x = cartesian.x
        result.y = cartesian.y
        result.z = cartesian.z
        return result

    @staticmethod
    def equals_epsilon(
        left: Optional["Cartesian3"],
        right: Optional["Cartesian3"],
        absolute_epsilon: float,
        relative_epsilon: Optional[float] = None,
    ) -> bool:
        """Componentwise comparison within the given tolerances."""
        if left is right:
            return True
        if left is None or right is None:
            return False
        return (
            equals_epsilon(left.x, right.x, absolute_epsilon, relative_epsilon)
            and equals_epsilon(left.y, right.y, absolute_epsilon, relative_epsilon)
            and equals_epsilon(left.z, right.z, absolute_epsilon, relative_epsilon)
        )

    @classmethod
    def from_array(cls, array: Sequence[float], start_index: int = 0) -> "Cartesian3":
        if array is None:
            raise InvalidArgumentError("array is required.")
        return cls(
            float(array[start_index]), float(array[start_index + 1]), float(array[start_index + 2])
        )

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


class ArrayPointOps:
    """Value operations for points stored as numpy arrays (e.g. rows of an (n, k) array)."""

    @staticmethod
    def clone(point: Optional[np.ndarray]) -> Optional[np.ndarray]:
        if point is None:
            return None
        return np.array(point, copy=True)

    @staticmethod
    def equals_epsilon(
        left: Optional[np.ndarray],
        right: Optional[np.ndarray],
        absolute_epsilon: float,
        relative_epsilon: Optional[float] = None,
    ) -> bool:
        if left is right:
            return True
        if left is None or right is None:
            return False

        left = np.asarray(left, dtype=np.float64)
        right = np.asarray(right, dtype=np.float64)
        if left.shape != right.shape:
            return False

        diff = np.abs(left - right)
        close = diff <= absolute_epsilon
        if relative_epsilon is not None:
            close |= diff <= relative_epsilon * np.maximum(np.abs(left), np.abs(right))
        return bool(np.all(close))
