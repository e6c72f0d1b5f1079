import itertools
import pytest
from render import main as render_cli, ensure_length, default_line

def _run(capsys, *argv):
    """
    Invoke the CLI and return (generation lines, elapsed line).
    """
    assert render_cli(list(argv)) == 0
    out = capsys.readouterr().out
    body, _, timing = out.rpartition("\n\n")
    return body.split("\n"), timing.strip()


def test_default_run_single_generation(capsys):
    lines, timing = _run(capsys, "--rule", "110", "--width", "5", "--height", "0")
    assert lines == ["    #"]
    assert timing.endswith("s")

def test_output_layout(capsys):
    assert render_cli(["-r", "110", "-x", "5", "-y", "0"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("    #\n\n")
    assert out.count("\n") == 3

def test_rule0_clears_custom_start_line(capsys):
    lines, _ = _run(capsys, "-r", "0", "-x", "4", "-y", "2", "--start-line", "# # ")
    assert lines == ["# # ", "    ", "    "]

def test_defaults(capsys):
    lines, _ = _run(capsys)
    assert len(lines) == 31                 # generation 0 + 30 steps
    assert lines[0] == " " * 29 + "#"
    assert all(len(line) == 30 for line in lines)

@pytest.mark.parametrize(
    "start,expected",
    [
        ("abc", "abc  "),
        ("# # #", "# # #"),
        ("##", "##   "),
        ("#a#b#c#d", "#a#b#"),
    ],
)
def test_start_line_is_normalized_to_width(capsys, start, expected):
    lines, _ = _run(capsys, "--start-line", start, "--width", "5", "--height", "1")
    assert lines[0] == expected
    assert len(lines[1]) == 5


def test_ensure_length_boundaries():
    assert ensure_length("abcde", 5) == "abcde"
    assert ensure_length("ab", 5) == "ab   "
    assert ensure_length("abcdefgh", 5) == "abcde"
    assert ensure_length("", 3) == "   "
    assert ensure_length("ab", 4, fill=".") == "ab.."

def test_ensure_length_counts_code_points():
    assert ensure_length("éé", 3) == "éé "
    assert ensure_length("█▓▒░", 2) == "█▓"

def test_default_line():
    assert default_line(1) == "#"
    assert default_line(4) == "   #"


@pytest.mark.parametrize(
    "argv",
    [
        ["--width", "0"],
        ["--width", "-3"],
        ["--rule", "256"],
        ["--rule", "-1"],
        ["--rule", "abc"],
        ["--height", "-1"],
        ["--depth", "3"],
    ],
)
def test_invalid_arguments_exit_before_running(capsys, argv):
    with pytest.raises(SystemExit) as exc:
        render_cli(argv)
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage" in captured.err

def test_clock_failure_aborts_without_output(capsys, monkeypatch):
    readings = itertools.count(100.0, -1.0)
    monkeypatch.setattr("simulate.time.perf_counter", lambda: next(readings))
    with pytest.raises(SystemExit) as exc:
        render_cli(["-x", "8", "-y", "3"])
    assert exc.value.code != 0
    assert capsys.readouterr().out == ""
