import io

import pytest

from oslabtools.shell import (
    UnknownCommandError,
    execute_shell,
    run_command,
    split_command,
)


def _simulate(text):
    output = io.StringIO()
    execute_shell(io.StringIO(text), output)
    return output.getvalue()


def test_exit_command():
    output = _simulate("exit\n")
    assert "Exiting shell..." in output


def test_info_command():
    output = _simulate("info\nexit\n")
    assert "dedup <inputFile> <outputFile>" in output
    assert "io-lat-write <outputFile> <number of iterations>" in output


def test_welcome_and_prompt():
    output = _simulate("exit\n")
    assert output.startswith("Welcome to the new shell! Type 'exit' to exit the shell\nshell> ")


def test_blank_lines_are_ignored():
    output = _simulate("\n    \nexit\n")
    assert output.count("shell> ") == 3
    assert output.endswith("Exiting shell...\n")


def test_end_of_input_stops_shell():
    output = _simulate("info\n")
    assert "Exiting shell..." not in output
    assert output.endswith("shell> ")


def test_unknown_command_reports_error(capsys):
    output = _simulate("nosuch arg\nexit\n")
    assert "Error executing command: nosuch" in capsys.readouterr().err
    assert "Execution time" not in output


def test_shell_runs_dedup(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_text("1 2 3 3")
    (tmp_path / "out.txt").write_text("")
    output = _simulate("dedup in.txt out.txt\nexit\n")
    assert "Execution time: " in output
    assert (tmp_path / "out.txt").read_text() == "3 2 1 "


@pytest.mark.parametrize(
    "line, expected",
    [
        ("dedup a b", ["dedup", "a", "b"]),
        ("  io-lat-write   f  10 ", ["io-lat-write", "f", "10"]),
        ("", []),
        ("     ", []),
        ("a\tb c", ["a\tb", "c"]),
    ],
)
def test_split_command(line, expected):
    assert split_command(line) == expected


def test_run_command_unknown():
    with pytest.raises(UnknownCommandError):
        run_command("nosuch", [])


def test_run_command_dedup(tmp_path):
    input_file = tmp_path / "in.txt"
    output_file = tmp_path / "out.txt"
    input_file.write_text("7 7 8")
    output_file.write_text("")
    result = run_command("dedup", [str(input_file), str(output_file)])
    assert result.status == 0
    assert result.elapsed_ms >= 0
    assert output_file.read_text() == "8 7 "


def test_run_command_reports_failure_status(capsys):
    result = run_command("dedup", ["one"])
    assert result.status == 1
    assert "Usage: dedup" in capsys.readouterr().err