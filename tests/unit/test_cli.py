"""Unit tests for the command line interface."""

import json

from homeplan.cli import main


class TestPlanCommand:
    """Tests for `homeplan plan`."""

    def test_prints_plan_json(self, capsys):
        exit_code = main(["plan", "--area", "1000", "--floors", "2", "--timeline", "24"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["costBreakdown"]["totalCost"] == 2536400

    def test_writes_output_file(self, tmp_path):
        out = tmp_path / "plan.json"
        exit_code = main([
            "plan", "--area", "1000", "--floors", "2", "--timeline", "24", "--out", str(out),
        ])

        assert exit_code == 0
        assert json.loads(out.read_text())["inputs"]["numberOfFloors"] == 2

    def test_rate_overrides_file(self, tmp_path, capsys):
        rates = tmp_path / "rates.json"
        rates.write_text(json.dumps({"laborWage": 700}))

        main(["plan", "--area", "1000", "--floors", "2", "--timeline", "24", "--config", str(rates)])

        data = json.loads(capsys.readouterr().out)
        assert data["config"]["laborWage"] == 700

    def test_invalid_input_exits_with_error(self, capsys):
        exit_code = main(["plan", "--area", "-5", "--floors", "2", "--timeline", "24"])

        assert exit_code == 1
        assert "VALIDATION_ERROR" in capsys.readouterr().err

    def test_degenerate_timeline_exits_with_error(self, capsys):
        exit_code = main(["plan", "--area", "1000", "--floors", "2", "--timeline", "4"])

        assert exit_code == 1
        assert "DEGENERATE_SCHEDULE" in capsys.readouterr().err


class TestCompressCommand:
    """Tests for `homeplan compress`."""

    def test_prints_compression(self, capsys):
        exit_code = main([
            "compress", "--area", "1000", "--floors", "2", "--timeline", "24", "--new-timeline", "18",
        ])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["risks"]) == 3
