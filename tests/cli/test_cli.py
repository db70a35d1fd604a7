"""
tests/cli/test_cli.py

Covers:
  - Default invocation
  - Explicit start date and hours
  - Policy overrides from flags and configuration files
  - Calculation errors and malformed arguments
"""

import json

import pytest

from worktime.cli import main


class TestMain:

    def test_defaults(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out == "2017-07-28 17:00:00\n"

    def test_explicit_arguments(self, capsys):
        assert main(["2017-07-24 09:00:00", "10"]) == 0
        assert capsys.readouterr().out.strip() == "2017-07-25 11:00:00"

    def test_holiday_flag(self, capsys):
        assert main(["2017-07-24 09:00:00", "10", "--holiday", "2017-07-25"]) == 0
        assert capsys.readouterr().out.strip() == "2017-07-26 11:00:00"

    def test_repeated_holidays(self, capsys):
        argv = ["2017-07-24 09:00:00", "10", "--holiday", "2017-07-25", "--holiday", "2017-07-26"]
        assert main(argv) == 0
        assert capsys.readouterr().out.strip() == "2017-07-27 11:00:00"

    def test_shift_flags(self, capsys):
        argv = ["2017-07-24 08:00:00", "10", "--start-hour", "8", "--end-hour", "16"]
        assert main(argv) == 0
        assert capsys.readouterr().out.strip() == "2017-07-25 10:00:00"

    def test_weekmask_flag(self, capsys):
        assert main(["2017-07-28 09:00:00", "16", "--weekmask", "1111110"]) == 0
        assert capsys.readouterr().out.strip() == "2017-07-29 17:00:00"

    def test_config_file_with_override(self, tmp_path, capsys):
        path = tmp_path / "worktime.json"
        path.write_text(
            json.dumps({"start_hour": 8, "end_hour": 16, "holidays": ["2017-07-25"]}),
            encoding="utf-8",
        )
        argv = ["2017-07-24 08:00:00", "10", "--config", str(path), "--end-hour", "17"]
        assert main(argv) == 0
        assert capsys.readouterr().out.strip() == "2017-07-26 09:00:00"

    def test_non_working_start(self, capsys):
        assert main(["2017-07-29 10:00:00", "1"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: The start date is a non-working day!" in captured.err

    def test_out_of_hours_start(self, capsys):
        assert main(["2017-07-24 18:00:00", "1"]) == 1
        assert "out of working hours" in capsys.readouterr().err

    def test_zero_hours(self, capsys):
        assert main(["2017-07-24 09:00:00", "0"]) == 1
        assert "greater than zero" in capsys.readouterr().err

    def test_invalid_shift(self, capsys):
        assert main(["--start-hour", "17", "--end-hour", "9"]) == 1
        assert "end_hour must be greater" in capsys.readouterr().err

    @pytest.mark.parametrize("idle", [0, "x"])
    def test_bad_max_idle_days_in_config(self, tmp_path, capsys, idle):
        path = tmp_path / "worktime.json"
        path.write_text(json.dumps({"max_idle_days": idle}), encoding="utf-8")
        assert main(["--config", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: max_idle_days must be an integer" in captured.err

    def test_missing_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.json")]) == 1
        assert "Cannot read configuration file" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "argv",
        [
            ["2017-07-24"],
            ["2017-07-24 09:00:00", "ten"],
            ["--holiday", "25/07/2017"],
        ],
    )
    def test_malformed_arguments_exit(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2
