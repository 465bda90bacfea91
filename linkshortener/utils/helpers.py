"""Helper utilities shared across the package.

Functions:
    as_timedelta(ttl) -> timedelta
        Normalize a TTL given as timedelta or number of seconds

Example:
    >>> from linkshortener.utils.helpers import as_timedelta
    >>> as_timedelta(90)
    datetime.timedelta(seconds=90)
"""

import math
from datetime import timedelta


def as_timedelta(ttl: timedelta | int | float) -> timedelta:
    """Normalize a TTL value into a timedelta.

    Args:
        ttl (timedelta | int | float):
            Either a timedelta or a number of seconds.

    Returns:
        timedelta: The TTL as a timedelta (sign is preserved, validation is the caller's job).

    Raises:
        TypeError:
            If `ttl` is neither a timedelta nor a real number.
        ValueError:
            If `ttl` is NaN, infinite or out of timedelta's range.
    """
    if isinstance(ttl, timedelta):
        return ttl
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise TypeError(f'TTL must be a timedelta or a number of seconds (given type: {type(ttl)}).')
    if isinstance(ttl, float) and not math.isfinite(ttl):
        raise ValueError(f'TTL must be a finite number of seconds (given value: {ttl}).')

    try:
        return timedelta(seconds=ttl)
    except OverflowError as e:
        raise ValueError(f'TTL is out of range (given value: {ttl}).') from e
