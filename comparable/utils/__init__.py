import logging

from comparable.invalid_bounds_exception import InvalidBoundsException

logger = logging.getLogger('comparable')


def check_bounds(lower_bound, upper_bound):
    """
    Check that the lower bound does not exceed the upper bound.
    The range predicates never call this, reversed bounds simply make them false.

    :param lower_bound: the lower end of the range
    :param upper_bound: the upper end of the range
    :raise InvalidBoundsException: if lower_bound > upper_bound
    """
    if lower_bound > upper_bound:
        raise InvalidBoundsException(lower_bound, upper_bound)
