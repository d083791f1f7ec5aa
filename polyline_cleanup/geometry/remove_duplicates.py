import logging
from typing import Any, Protocol, Sequence, TypeVar

from polyline_cleanup.errors import InvalidArgumentError

from .math_utils import EPSILON10

logger = logging.getLogger(__name__)

T = TypeVar("T")

REMOVE_DUPLICATES_EPSILON = EPSILON10


class ValueOps(Protocol):
    """Operations a value type must supply to be filtered."""

    def equals_epsilon(self, left: Any, right: Any, epsilon: float) -> bool: ...

    def clone(self, value: Any) -> Any: ...


def remove_duplicates(
    values: Sequence[T], value_ops: ValueOps, wrap_around: bool = False
) -> Sequence[T]:
    """
    Remove adjacent duplicate values from an ordered sequence.

    Values are compared pairwise with value_ops.equals_epsilon using
    REMOVE_DUPLICATES_EPSILON. The input sequence is never modified.

    Args:
        values: Ordered sequence of values (e.g. polyline points)
        value_ops: Object providing equals_epsilon(left, right, epsilon) and clone(value)
        wrap_around: Also compare the last value against the first one (closed rings)

    Returns:
        The input sequence itself if no duplicates were found, otherwise a new list.
        Values before the first duplicate are shared with the input, values after
        it are clones.

    Example:
        >>> points = [Cartesian3(1, 1, 1), Cartesian3(1, 1, 1), Cartesian3(2, 2, 2)]
        >>> remove_duplicates(points, Cartesian3)
        [Cartesian3(x=1, y=1, z=1), Cartesian3(x=2, y=2, z=2)]
    """
    if values is None:
        raise InvalidArgumentError("values is required.")
    if value_ops is None:
        raise InvalidArgumentError("value_ops is required.")

    length = len(values)
    if length < 2:
        return values

    # Look for the first duplicate pair without allocating anything
    i = 1
    while i < length:
        if value_ops.equals_epsilon(values[i - 1], values[i], REMOVE_DUPLICATES_EPSILON):
            break
        i += 1

    if i == length:
        if wrap_around and value_ops.equals_epsilon(
            values[0], values[-1], REMOVE_DUPLICATES_EPSILON
        ):
            return values[1:]
        return values

    cleaned_values = list(values[:i])
    v0 = values[i - 1]
    for v1 in values[i:]:
        if not value_ops.equals_epsilon(v0, v1, REMOVE_DUPLICATES_EPSILON):
            cleaned_values.append(value_ops.clone(v1))
            v0 = v1

    if (
        wrap_around
        and len(cleaned_values) > 1
        and value_ops.equals_epsilon(
            cleaned_values[0], cleaned_values[-1], REMOVE_DUPLICATES_EPSILON
        )
    ):
        del cleaned_values[0]

    logger.debug(f"Removed {length - len(cleaned_values)} duplicate values out of {length}")
    return cleaned_values
