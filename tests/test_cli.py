"""Tests for CLI command registration and invocation."""
from __future__ import annotations
import json
import pytest
from typer.testing import CliRunner
from guidelint.cli.main import app

runner = CliRunner()


class TestCLIHelp:
    def test_main_help(self) -> None:
        assert runner.invoke(app, ["--help"]).exit_code == 0

    def test_check_help(self) -> None:
        assert runner.invoke(app, ["check", "--help"]).exit_code == 0

    def test_rules_help(self) -> None:
        assert runner.invoke(app, ["rules", "--help"]).exit_code == 0


class TestCheckCommand:
    def test_clean_project(self, clean_project) -> None:
        r = runner.invoke(app, ["check", str(clean_project)])
        assert r.exit_code == 0 and r.stdout.strip() == ""

    def test_violations_exit_non_zero(self, js_project) -> None:
        r = runner.invoke(app, ["check", str(js_project)])
        assert r.exit_code == 1
        assert "legacyLoader.js:3: [prefer-arrow-function]" in r.stdout

    def test_json_format(self, js_project) -> None:
        r = runner.invoke(app, ["check", str(js_project), "--format", "json"])
        assert r.exit_code == 1
        payload = json.loads(r.stdout)
        assert payload["files_checked"] == 2 and payload["violation_count"] == 7

    def test_rich_format(self, js_project) -> None:
        r = runner.invoke(app, ["check", str(js_project), "-F", "rich"])
        assert r.exit_code == 1 and "violation(s)" in r.stdout

    def test_disable_rules(self, js_project) -> None:
        r = runner.invoke(app, [
            "check", str(js_project), "--format", "json",
            "--disable", "prefer-arrow-function", "-D", "snake-case-filename",
        ])
        payload = json.loads(r.stdout)
        assert payload["violation_count"] == 5

    def test_config_file_is_discovered(self, js_project) -> None:
        (js_project / "guidelint.yaml").write_text("output_format: json\nrules:\n  disabled: [camel-case-naming]\n")
        r = runner.invoke(app, ["check", str(js_project)])
        assert json.loads(r.stdout)["violation_count"] == 6

    def test_unknown_rule_in_config_file(self, js_project) -> None:
        (js_project / "guidelint.yaml").write_text("rules:\n  disabled: [prefer-arow-function]\n")
        r = runner.invoke(app, ["check", str(js_project)])
        assert r.exit_code == 2 and "prefer-arow-function" in r.stdout

    def test_jobs_option(self, js_project) -> None:
        assert runner.invoke(app, ["check", str(js_project), "--jobs", "2"]).exit_code == 1

    def test_missing_file_is_reported(self, tmp_path) -> None:
        r = runner.invoke(app, ["check", str(tmp_path / "gone.js")])
        assert r.exit_code == 1 and "[read-error]" in r.stdout

    @pytest.mark.parametrize("args", [
        ["--format", "xml"],
        ["--disable", "no-such-rule"],
        ["--config", "does-not-exist.yaml"],
    ])
    def test_usage_errors_exit_2(self, clean_project, args) -> None:
        assert runner.invoke(app, ["check", str(clean_project), *args]).exit_code == 2


class TestRulesCommand:
    def test_lists_rules(self) -> None:
        r = runner.invoke(app, ["rules"])
        assert r.exit_code == 0 and "GuideLint rules" in r.stdout
