"""Unit tests for the Counter class."""

from dirtree.counter import Counter


def test_counter_starts_empty():
    counter = Counter()
    assert counter.summary() == (0, 0)


def test_counter_tally():
    counter = Counter()
    for is_directory in (True, False, False, True, False):
        counter.tally(is_directory)

    assert counter.directories == 2
    assert counter.files == 3
    assert counter.summary() == (2, 3)
