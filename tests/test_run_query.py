"""Tests for the app.run_query command."""

from __future__ import annotations

import pytest

from app.config import QueryConfig
from app.run_query import DEMO_AS_OF, main, parse_args


class TestParseArgs:
    def test_demo_defaults(self):
        config = parse_args(["--demo"])
        assert config.demo
        assert config.base == "2015-02-01"
        assert config.as_of == DEMO_AS_OF

    def test_csv_options(self):
        config = parse_args(
            ["r.csv", "--base", "2015-02-01", "--as-of", "2015-04-30",
             "--as-of", "2015-06-30", "--no-data", "nan"]
        )
        assert config == QueryConfig(
            csv_path="r.csv",
            base="2015-02-01",
            as_of=("2015-04-30", "2015-06-30"),
            no_data="nan",
        )

    def test_csv_required_without_demo(self):
        with pytest.raises(SystemExit):
            parse_args(["--base", "2015-02-01", "--as-of", "2015-04-30"])

    def test_as_of_required(self):
        with pytest.raises(SystemExit):
            parse_args(["r.csv", "--base", "2015-02-01"])


class TestMain:
    def test_demo_output(self, capsys):
        assert main(["--demo"]) == 0
        out = capsys.readouterr().out
        assert "ReturnIndex(5 dates, 2015-01-10..2015-06-10)" in out
        assert "2015-04-30    +8.6750%" in out
        assert "2015-06-30    -4.3660%" in out
        assert "no data in range" in out

    def test_csv_run(self, tmp_path, capsys):
        path = tmp_path / "returns.csv"
        path.write_text("date,return\n2015-01-10,0.10\n2015-02-10,0.05\n")
        code = main([str(path), "--base", "2015-02-01", "--as-of", "2015-02-28"])
        assert code == 0
        assert "+5.0000%" in capsys.readouterr().out

    def test_validation_error_exit_code(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.csv"), "--base", "2015-02-01", "--as-of", "2015-02-28"])
        assert code == 2
        assert "not found" in capsys.readouterr().err
