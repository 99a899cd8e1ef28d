"""Tests for the bowling-split console command."""

import pytest
from typer.testing import CliRunner

from bowling_split.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestJudgeCommand:
    @pytest.mark.parametrize(
        "args,line",
        [
            ([], "Strike!"),
            (["7"], "there's only one left"),
            ([str(p) for p in range(1, 11)], "Gutter!"),
            ([str(p) for p in range(1, 11)] + ["3"], "too many arguments"),
            (["7", "10"], "remained pins are split"),
            (["6", "10"], "remained pins are not split"),
            (["4", "6"], "remained pins are split"),
            (["1", "7", "10"], "remained pins are not split"),
            (["x", "5"], "Illegal number"),
            (["11", "5"], "Number too big"),
        ],
    )
    def test_prints_one_line(self, runner: CliRunner, args: list[str], line: str):
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert result.stdout == line + "\n"

    def test_negative_pin_is_not_an_option(self, runner: CliRunner):
        result = runner.invoke(app, ["-1", "5"])
        assert result.exit_code == 0
        assert result.stdout == "Number too small\n"

    def test_double_dash_separator(self, runner: CliRunner):
        result = runner.invoke(app, ["--", "7", "10"])
        assert result.exit_code == 0
        assert result.stdout == "remained pins are split\n"

    def test_verbose_keeps_single_stdout_line(self, runner: CliRunner):
        result = runner.invoke(app, ["--verbose", "7", "10"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[-1] == "remained pins are split"

    def test_help(self, runner: CliRunner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--verbose" in result.stdout

    def test_repeated_runs_match(self, runner: CliRunner):
        first = runner.invoke(app, ["2", "7", "10"])
        second = runner.invoke(app, ["2", "7", "10"])
        assert first.stdout == second.stdout
