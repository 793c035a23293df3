"""End-to-end tests for the patternbook command line."""
import json

import pytest
import yaml

from patternbook.cli.main import main
from patternbook.registry import PATTERN_PACKAGES


def run_cli(*argv):
    """Run the CLI, returning the exit code (0 when it returns normally)."""
    try:
        main(list(argv))
    except SystemExit as e:
        return e.code
    return 0


class TestCLIIntegration:
    def test_list_json(self, capsys):
        assert run_cli("list", "--format", "json") == 0
        data = json.loads(capsys.readouterr().out)
        assert [entry["name"] for entry in data["demos"]] == list(PATTERN_PACKAGES)

    def test_list_yaml_from_global_format(self, capsys):
        assert run_cli("--format", "yaml", "list") == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["demos"][0]["name"] == "strategy"

    def test_list_table(self, capsys):
        assert run_cli("list") == 0
        out = capsys.readouterr().out
        assert "Pattern" in out
        assert "template_method" in out

    def test_list_detailed(self, capsys):
        assert run_cli("list", "--format", "list") == 0
        assert "Pattern: facade" in capsys.readouterr().out

    def test_explain(self, capsys):
        assert run_cli("explain", "decorator") == 0
        assert "open for extension" in capsys.readouterr().out

    def test_run_selected_demos(self, capsys):
        assert run_cli("run", "strategy", "factory") == 0
        out = capsys.readouterr().out
        assert "===== strategy =====" in out
        assert "Mallard is blasting off!" in out
        assert "===== factory =====" in out
        assert "Cutting the pizza into square slices" in out

    def test_run_all_with_config(self, tmp_path, capsys):
        config = tmp_path / "patternbook.yaml"
        config.write_text(
            "demo:\n  coffee_answer: 'yes'\n  race_delay_seconds: 0.01\n  remote_slots: 7\n"
        )

        assert run_cli("--config", str(config), "run", "--all") == 0

        out = capsys.readouterr().out
        for name in PATTERN_PACKAGES:
            assert f"===== {name} =====" in out
        assert "Adding creamer" in out

    def test_unknown_demo_exits_with_error(self, capsys):
        assert run_cli("--log-level", "CRITICAL", "run", "visitor") == 1
        captured = capsys.readouterr()
        assert "No demo named 'visitor'" in captured.err
        assert "=====" not in captured.out

    def test_run_without_patterns(self, capsys):
        assert run_cli("--log-level", "CRITICAL", "run") == 1
        assert "--all" in capsys.readouterr().err

    def test_bad_config_exits_with_error(self, tmp_path, capsys):
        config = tmp_path / "patternbook.yaml"
        config.write_text("demo:\n  race_workers: 1\n")

        assert run_cli("--config", str(config), "list") == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert run_cli() == 1
        assert "usage" in capsys.readouterr().out

    def test_keyboard_interrupt(self, monkeypatch, capsys):
        def interrupted(args, config):
            raise KeyboardInterrupt

        monkeypatch.setattr("patternbook.cli.main.execute_command", interrupted)

        assert run_cli("list") == 130
        assert "cancelled" in capsys.readouterr().err

    @pytest.mark.parametrize("flag", ["--help", "--version"])
    def test_informational_flags(self, flag, capsys):
        assert run_cli(flag) == 0
