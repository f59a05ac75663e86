from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from gridmatrix import cli


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf8")
    return path


def test_power_command(tmp_path: Path) -> None:
    runner = CliRunner()
    shear = _write(tmp_path, "shear.txt", "1 1\n0 1\n")
    result = runner.invoke(cli.app, ["power", str(shear), "--exponent", "10"])
    if result.exception and not isinstance(result.exception, SystemExit):
        raise result.exception
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "shear.txt^10" in lines[0]
    assert lines[1:] == ["1 10", "0 1"]


def test_multiply_command_with_semiring(tmp_path: Path) -> None:
    runner = CliRunner()
    left = _write(tmp_path, "left.txt", "0 4\n1 0\n")
    right = _write(tmp_path, "right.txt", "0 2\n3 0\n")
    result = runner.invoke(
        cli.app,
        ["multiply", str(left), str(right), "--semiring", "min-plus", "--field-size", "2"],
    )
    assert result.exit_code == 0
    assert result.output.splitlines()[1:] == [" 0  2", " 1  0"]


def test_boolean_kind(tmp_path: Path) -> None:
    runner = CliRunner()
    adjacency = _write(tmp_path, "adj.txt", "0 1 0\n0 0 1\n0 0 0\n")
    result = runner.invoke(cli.app, ["power", str(adjacency), "-e", "2", "--kind", "bool"])
    assert result.exit_code == 0
    assert result.output.splitlines()[1:] == [
        "False False True",
        "False False False",
        "False False False",
    ]


def test_dimension_mismatch_reports_failure(tmp_path: Path) -> None:
    runner = CliRunner()
    left = _write(tmp_path, "left.txt", "1 2 3\n4 5 6\n")
    right = _write(tmp_path, "right.txt", "1 2\n3 4\n")
    result = runner.invoke(cli.app, ["multiply", str(left), str(right)])
    assert result.exit_code == 1
    assert "Multiplication failed" in result.output


def test_zero_exponent_reports_failure(tmp_path: Path) -> None:
    runner = CliRunner()
    shear = _write(tmp_path, "shear.txt", "1 1\n0 1\n")
    result = runner.invoke(cli.app, ["power", str(shear), "--exponent", "0"])
    assert result.exit_code == 1
    assert "Exponentiation failed" in result.output


def test_unknown_semiring(tmp_path: Path) -> None:
    runner = CliRunner()
    shear = _write(tmp_path, "shear.txt", "1 1\n0 1\n")
    result = runner.invoke(cli.app, ["power", str(shear), "-e", "2", "--semiring", "nope"])
    assert result.exit_code == 1
    assert "Unknown semiring" in result.output
