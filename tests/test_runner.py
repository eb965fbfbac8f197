import io
import subprocess
import sys

from fibbench.runner import main, run


def lines(args):
    out = io.StringIO()
    run(args, out)
    return out.getvalue().splitlines()


def test_zero_repeats():
    assert lines(["0", "10"]) == []


def test_repeats_result():
    assert lines(["3", "5"]) == ["5", "5", "5"]


def test_non_numeric_input_is_zero():
    assert lines(["2", "abc"]) == ["0", "0"]


def test_non_numeric_count_is_zero():
    assert lines(["xyz", "7"]) == []


def test_missing_arguments():
    assert lines([]) == []
    assert lines(["3"]) == ["0", "0", "0"]


def test_decimal_marker_arguments():
    assert lines(["0d2", "0d10"]) == ["55", "55"]


def test_negative_count():
    assert lines(["-4", "10"]) == []


def test_negative_input_passes_through():
    assert lines(["2", "-4"]) == ["-4", "-4"]


def test_extra_arguments_ignored():
    assert lines(["1", "10", "99"]) == ["55"]


def test_identical_runs_match():
    assert lines(["4", "15"]) == lines(["4", "15"])


def test_defaults_to_stdout(capsys):
    run(["2", "10"])
    assert capsys.readouterr().out == "55\n55\n"


def test_main(capsys):
    assert main(["2", "20"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "6765\n6765\n"
    assert captured.err == ""


def test_main_recursion_limit(capsys):
    assert main(["1", "100000"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")


def test_module_entry_point():
    result = subprocess.run(
        [sys.executable, "-m", "fibbench", "2", "10"],
        capture_output=True, text=True,
    )
    assert result.returncode == 0
    assert result.stdout == "55\n55\n"
