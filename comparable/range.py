from __future__ import annotations

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    def __ge__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)


def is_between(value: T, lower_bound: T, upper_bound: T) -> bool:
    """
    Check if a value is strictly greater than the lower bound and strictly less than the upper bound.

    :param value: the value to compare
    :param lower_bound: the lower end of the range, excluded
    :param upper_bound: the upper end of the range, excluded
    :return: true if the value is inside the open range, false otherwise
    """
    return bool(value > lower_bound and value < upper_bound)


def is_in_range(value: T, lower_bound: T, upper_bound: T) -> bool:
    """
    Check if a value is greater than or equal to the lower bound and less than or equal to the upper bound.

    :param value: the value to compare
    :param lower_bound: the lower end of the range, included
    :param upper_bound: the upper end of the range, included
    :return: true if the value is inside the closed range, false otherwise
    """
    return bool(value >= lower_bound and value <= upper_bound)
