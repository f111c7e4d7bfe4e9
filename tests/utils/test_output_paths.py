from __future__ import annotations

from pathlib import Path

from scansummary.utils.output_paths import (
    build_artifact_path,
    ensure_parent_dir,
    report_path_for_run,
    resolve_override_path,
    summary_prefix_from_path,
    table_paths_for_run,
)


def test_prefix_and_artifact_paths(tmp_path: Path) -> None:
    assert summary_prefix_from_path(Path("/x/scan.summary.json")) == "scan.summary"
    assert build_artifact_path(None, "scan", ".report.json") == Path("scan.report.json")
    assert build_artifact_path(tmp_path, "scan", ".rules.csv") == tmp_path / "scan.rules.csv"


def test_report_path_defaults_and_overrides(tmp_path: Path) -> None:
    summary = Path("in/scan.json")
    assert report_path_for_run(summary, None, None) == Path("scan.report.json")
    assert report_path_for_run(summary, tmp_path, None) == tmp_path / "scan.report.json"
    assert report_path_for_run(summary, tmp_path, Path("r.json")) == tmp_path / "r.json"
    absolute = tmp_path / "abs.json"
    assert report_path_for_run(summary, Path("other"), absolute) == absolute
    assert resolve_override_path(None, tmp_path) is None


def test_table_paths(tmp_path: Path) -> None:
    rules, targets = table_paths_for_run(Path("scan.json"), tmp_path)
    assert rules == tmp_path / "scan.rules.csv"
    assert targets == tmp_path / "scan.targets.csv"


def test_ensure_parent_dir(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "file.json"
    ensure_parent_dir(target)
    assert target.parent.is_dir()
