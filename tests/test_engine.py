"""Tests for file discovery and the GuideLint orchestration engine."""
from __future__ import annotations
from pathlib import Path
import pytest
from guidelint.config.settings import GuideLintSettings
from guidelint.core.engine import GuideLintEngine, LintResult, discover_files


class TestDiscoverFiles:
    def test_walks_directories_and_skips_excluded(self, js_project: Path, default_settings) -> None:
        files = discover_files([js_project], default_settings)
        assert [f.name for f in files] == ["cart_total.js", "legacyLoader.js"]

    def test_explicit_files_are_kept(self, js_project: Path, default_settings) -> None:
        readme = js_project / "src" / "readme.md"
        assert discover_files([readme], default_settings) == [readme]

    def test_duplicates_are_collapsed(self, js_project: Path, default_settings) -> None:
        target = js_project / "src" / "cart_total.js"
        assert discover_files([target, js_project / "src"], default_settings).count(target) == 1

    def test_custom_extensions(self, js_project: Path) -> None:
        settings = GuideLintSettings(extensions=[".md"])
        assert [f.name for f in discover_files([js_project], settings)] == ["readme.md"]


class TestGuideLintEngine:
    def test_run_reports_violations(self, js_project: Path) -> None:
        result = GuideLintEngine().run([js_project])
        assert len(result.files) == 2
        assert result.exit_code == 1
        assert {Path(v.file_path).name for v in result.violations} == {"legacyLoader.js"}

    def test_clean_project(self, clean_project: Path) -> None:
        result = GuideLintEngine().run([clean_project])
        assert result.exit_code == 0 and result.violations == []

    def test_missing_file_is_a_read_error(self, clean_project: Path) -> None:
        missing = clean_project / "src" / "gone.js"
        result = GuideLintEngine().run([missing, clean_project])
        assert [v.rule_id for v in result.violations] == ["read-error"]
        assert result.violations[0].file_path == str(missing)
        assert len(result.files) == 2 and result.has_errors

    def test_undecodable_file_is_a_read_error(self, tmp_path: Path) -> None:
        binary = tmp_path / "blob.js"
        binary.write_bytes(b"\xff\xfe\x00\x81bad")
        result = GuideLintEngine().check_file(binary)
        assert [v.rule_id for v in result.violations] == ["read-error"]

    @pytest.mark.parametrize("jobs", [1, 4])
    def test_results_independent_of_worker_count(self, js_project: Path, jobs: int) -> None:
        baseline = GuideLintEngine(GuideLintSettings(jobs=1)).run([js_project]).violations
        assert GuideLintEngine(GuideLintSettings(jobs=jobs)).run([js_project]).violations == baseline

    def test_results_in_path_order(self, js_project: Path) -> None:
        result = GuideLintEngine(GuideLintSettings(jobs=4)).run([js_project])
        assert [f.path for f in result.files] == sorted(f.path for f in result.files)

    def test_disabled_rules_from_settings(self, js_project: Path) -> None:
        settings = GuideLintSettings(rules={"disabled": ["snake-case-filename"]})
        result = GuideLintEngine(settings).run([js_project])
        assert "snake-case-filename" not in {v.rule_id for v in result.violations}

    def test_jobs_default_to_cpu_count(self) -> None:
        assert GuideLintEngine().jobs >= 1


class TestLintResult:
    def test_counts_by_rule(self, js_project: Path) -> None:
        counts = GuideLintEngine().run([js_project]).counts_by_rule()
        assert counts["prefer-arrow-function"] == 1
        assert list(counts) == sorted(counts)

    def test_empty_result(self) -> None:
        result = LintResult(files=[])
        assert result.exit_code == 0 and not result.has_errors and result.counts_by_rule() == {}
