from katas.series import series


def test_with_zero_length():
    assert series("92017", 0) == [""] * 6


def test_with_length_2():
    assert series("92017", 2) == ["92", "20", "01", "17"]


def test_with_numbers_length():
    assert series("92017", 5) == ["92017"]


def test_too_long():
    assert series("92017", 6) == []


def test_length_one():
    assert series("123", 1) == ["1", "2", "3"]