import pytest

from hypecheck.history import SessionHistory
from hypecheck.models import MediaType, result_from_dict


@pytest.fixture
def result(image_payload):
    return result_from_dict(image_payload, MediaType.IMAGE)


def test_add_assigns_id_and_timestamp(result):
    history = SessionHistory()

    entry = history.add(MediaType.IMAGE, "caption", result)

    assert len(entry.id) == 32
    assert entry.created_at > 0
    assert history.get(entry.id) is entry


def test_entries_are_newest_first(result):
    history = SessionHistory()
    first = history.add(MediaType.IMAGE, "first", result)
    second = history.add(MediaType.AUDIO, "second", result)

    assert history.entries() == [second, first]
    assert history.latest() is second
    assert history.at(2) is first


def test_oldest_entries_drop_past_capacity(result):
    history = SessionHistory(max_entries=2)
    oldest = history.add(MediaType.IMAGE, "1", result)
    history.add(MediaType.IMAGE, "2", result)
    history.add(MediaType.IMAGE, "3", result)

    assert len(history) == 2
    assert history.get(oldest.id) is None


def test_adding_known_id_is_a_no_op(result):
    history = SessionHistory()
    original = history.add(MediaType.IMAGE, "demo", result, entry_id="demo-1")

    again = history.add(MediaType.IMAGE, "demo", result, entry_id="demo-1")

    assert again is original
    assert len(history) == 1


def test_at_out_of_range_returns_none(result):
    history = SessionHistory()
    history.add(MediaType.IMAGE, "x", result)

    assert history.at(0) is None
    assert history.at(2) is None


def test_clear_empties_history(result):
    history = SessionHistory()
    history.add(MediaType.IMAGE, "x", result)

    history.clear()

    assert len(history) == 0
    assert history.latest() is None


def test_entries_returns_a_copy(result):
    history = SessionHistory()
    history.add(MediaType.IMAGE, "x", result)

    history.entries().clear()

    assert len(history) == 1
