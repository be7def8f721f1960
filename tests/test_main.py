"""Tests for the ``python -m rangelist`` session replay."""

import io

from rangelist.__main__ import SESSION, main, run


def test_run_prints_each_step():
    out = io.StringIO()
    ranges = run(out)
    lines = out.getvalue().splitlines()

    assert len(lines) == len(SESSION)
    assert lines[0] == "add([1, 5)) -> [1, 5)"
    assert lines[3] == "add([20, 21)) -> [1, 5) [10, 21)"
    assert lines[6] == "remove([10, 10)) -> [1, 8) [10, 21)"
    assert lines[-1] == "remove([3, 19)) -> [1, 3) [19, 21)"
    assert ranges.to_text() == "[1, 3) [19, 21)"


def test_main_exit_status(capsys):
    assert main() == 0
    assert capsys.readouterr().out.endswith("[1, 3) [19, 21)\n")
