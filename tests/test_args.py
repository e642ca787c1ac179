import pytest

from mosuser.args import ArgScanner, UsageError, parse_flags


def test_clustered_flags():
    scanner = ArgScanner(["ls", "-lF", "x"])
    assert list(scanner) == ["l", "F"]
    assert scanner.rest() == ["x"]


def test_no_options():
    scanner = ArgScanner(["cat", "a", "b"])
    assert list(scanner) == []
    assert scanner.rest() == ["a", "b"]


def test_double_dash_ends_options():
    scanner = ArgScanner(["echo", "-n", "--", "-x"])
    assert list(scanner) == ["n"]
    assert scanner.rest() == ["-x"]


def test_lone_dash_is_positional():
    scanner = ArgScanner(["cat", "-", "f"])
    assert list(scanner) == []
    assert scanner.rest() == ["-", "f"]


def test_stops_at_first_word():
    scanner = ArgScanner(["ls", "-d", "dir", "-l"])
    assert list(scanner) == ["d"]
    assert scanner.rest() == ["dir", "-l"]


def test_argument_attached():
    scanner = ArgScanner(["prog", "-ofile", "a"])
    values = {}
    for letter in scanner:
        values[letter] = scanner.argument()
    assert values == {"o": "file"}
    assert scanner.rest() == ["a"]


def test_argument_separate_word():
    scanner = ArgScanner(["prog", "-vo", "file", "a"])
    seen = []
    for letter in scanner:
        seen.append(letter)
        if letter == "o":
            seen.append(scanner.argument())
    assert seen == ["v", "o", "file"]
    assert scanner.rest() == ["a"]


def test_argument_missing():
    scanner = ArgScanner(["prog", "-o"])
    with pytest.raises(UsageError):
        for _ in scanner:
            scanner.argument()


def test_parse_flags_counts():
    flags, rest = parse_flags(["ls", "-ld", "-l", "p"], "dFl")
    assert flags["l"] == 2
    assert flags["d"] == 1
    assert flags["F"] == 0
    assert rest == ["p"]


def test_parse_flags_unknown():
    with pytest.raises(UsageError) as info:
        parse_flags(["ls", "-z"], "dFl")
    assert info.value.option == "z"


def test_parse_flags_empty_argv_tail():
    flags, rest = parse_flags(["sh"], "ix")
    assert sum(flags.values()) == 0
    assert rest == []