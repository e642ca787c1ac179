import pytest

from mosuser.history import MAXHISTORY, History


def test_default_limit():
    assert History().limit == MAXHISTORY


def test_invalid_limit():
    with pytest.raises(ValueError):
        History(0)


def test_add_and_index():
    history = History()
    assert history.add("ls")
    assert history.add("pwd")
    assert list(history) == ["ls", "pwd"]
    assert history[0] == "ls"
    assert history[-1] == "pwd"
    assert len(history) == 2


def test_add_rejects_empty_lines():
    history = History()
    assert not history.add("")
    assert not history.add("\n")
    assert len(history) == 0


def test_add_strips_trailing_newline():
    history = History()
    history.add("echo hi\n")
    assert history[0] == "echo hi"


def test_consecutive_duplicates_are_stored_once():
    history = History()
    history.add("ls")
    assert not history.add("ls")
    history.add("pwd")
    assert history.add("ls")
    assert list(history) == ["ls", "pwd", "ls"]


def test_oldest_line_dropped_when_full():
    history = History(3)
    for line in ["a", "b", "c", "d"]:
        history.add(line)
    assert list(history) == ["b", "c", "d"]
    assert len(history) == history.limit


def test_load_skips_empty_lines():
    history = History()
    history.load("ls\n\npwd\n")
    assert list(history) == ["ls", "pwd"]


def test_load_keeps_first_lines_up_to_limit():
    history = History(2)
    history.load("a\nb\nc\n")
    assert list(history) == ["a", "b"]


def test_load_empty_text_keeps_history():
    history = History()
    history.add("ls")
    history.load("")
    assert list(history) == ["ls"]


def test_load_replaces_history():
    history = History()
    history.add("old")
    history.load("new\n")
    assert list(history) == ["new"]


def test_dump_load_round_trip():
    history = History()
    for line in ["echo a", "cat f", "ls -l"]:
        history.add(line)
    other = History()
    other.load(history.dump())
    assert list(other) == list(history)


def test_dump_format():
    history = History()
    history.add("ls")
    history.add("pwd")
    assert history.dump() == "ls\npwd\n"