from datetime import datetime, timezone

import pytest

from katas.gigasecond import after


def _utc(*parts):
    return datetime(*parts, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "start, expected",
    [
        (_utc(2011, 4, 25, 0, 0, 0), _utc(2043, 1, 1, 1, 46, 40)),
        (_utc(1977, 6, 13, 0, 0, 0), _utc(2009, 2, 19, 1, 46, 40)),
        (_utc(1959, 7, 19, 0, 0, 0), _utc(1991, 3, 27, 1, 46, 40)),
        (_utc(2015, 1, 24, 22, 0, 0), _utc(2046, 10, 2, 23, 46, 40)),
        (_utc(2015, 1, 24, 23, 59, 59), _utc(2046, 10, 3, 1, 46, 39)),
    ],
)
def test_after(start, expected):
    assert after(start) == expected