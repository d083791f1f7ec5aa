from typing import Optional

from polyline_cleanup.errors import InvalidArgumentError

EPSILON1 = 0.1
EPSILON2 = 0.01
EPSILON3 = 0.001
EPSILON4 = 0.0001
EPSILON5 = 0.00001
EPSILON6 = 0.000001
EPSILON7 = 0.0000001
EPSILON8 = 0.00000001
EPSILON9 = 0.000000001
EPSILON10 = 0.0000000001
EPSILON11 = 0.00000000001
EPSILON12 = 0.000000000001
EPSILON13 = 0.0000000000001
EPSILON14 = 0.00000000000001


def equals_epsilon(
    left: float, right: float, absolute_epsilon: float, relative_epsilon: Optional[float] = None
) -> bool:
    """
    Compare two scalars using an absolute tolerance, optionally also a relative one.

    Args:
        left: First value
        right: Second value
        absolute_epsilon: Largest difference treated as equal
        relative_epsilon: Tolerance relative to the larger magnitude of the two values,
            only applied when given

    Returns:
        True if the values are equal within either tolerance
    """
    if left is None:
        raise InvalidArgumentError("left is required.")
    if right is None:
        raise InvalidArgumentError("right is required.")

    diff = abs(left - right)
    if diff <= absolute_epsilon:
        return True
    if relative_epsilon is None:
        return False
    return diff <= relative_epsilon * max(abs(left), abs(right))
