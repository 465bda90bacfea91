"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. as_timedelta() normalization
   - Ensures timedeltas pass through and numbers are read as seconds.
   - Ensures other types raise TypeError.
   - Ensures NaN, infinite and out-of-range numbers raise ValueError.
"""

from datetime import timedelta

import pytest

from linkshortener.utils.helpers import as_timedelta


# -------------------------------
# 1. as_timedelta()
# -------------------------------


@pytest.mark.parametrize(
    'ttl, expected',
    [
        (timedelta(minutes=2), timedelta(minutes=2)),
        (60, timedelta(seconds=60)),
        (1.5, timedelta(seconds=1.5)),
        (0, timedelta(0)),
        (-3, timedelta(seconds=-3)),
    ],
)
def test_as_timedelta(ttl, expected):
    assert as_timedelta(ttl) == expected


@pytest.mark.parametrize('ttl', ['60', None, True, [60]])
def test_as_timedelta_with_invalid_type(ttl):
    with pytest.raises(TypeError):
        as_timedelta(ttl)


@pytest.mark.parametrize('ttl', [float('nan'), float('inf'), float('-inf')])
def test_as_timedelta_with_non_finite_number(ttl):
    with pytest.raises(ValueError, match='TTL must be a finite number of seconds'):
        as_timedelta(ttl)


@pytest.mark.parametrize('ttl', [10**14, -(10**14), 1e20])
def test_as_timedelta_out_of_range(ttl):
    with pytest.raises(ValueError, match='TTL is out of range'):
        as_timedelta(ttl)
