import io

import pytest

from toolbox.echo import echo, main


@pytest.mark.parametrize(
    "newline, sep, args, want",
    [
        (True, "", [], "\n"),
        (False, "", [], ""),
        (True, "\t", ["one", "two", "three"], "one\ttwo\tthree\n"),
        (True, ",", ["a", "b", "c"], "a,b,c\n"),
        (False, ":", ["1", "2", "3"], "1:2:3"),
    ],
)
def test_echo(newline, sep, args, want):
    out = io.StringIO()
    echo(newline, sep, args, out)
    assert out.getvalue() == want


def test_echo_defaults_to_stdout(capsys):
    echo(True, " ", ["a", "b"])
    assert capsys.readouterr().out == "a b\n"


def test_main_default_separator(capsys):
    assert main(["one", "two", "three"]) == 0
    assert capsys.readouterr().out == "one two three\n"


def test_main_flags(capsys):
    assert main(["-n", "-s", ":", "1", "2", "3"]) == 0
    assert capsys.readouterr().out == "1:2:3"


def test_main_no_args(capsys):
    main([])
    assert capsys.readouterr().out == "\n"