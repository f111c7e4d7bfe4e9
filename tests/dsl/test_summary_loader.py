"""Tests for loading and validating summary documents."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from scansummary.dsl.loader import (
    load_summary,
    load_summary_text,
    summary_schema,
    validate_summary,
)
from scansummary.exceptions import InvalidDocumentError, MalformedResultError


def test_packaged_schema_loads() -> None:
    schema = summary_schema()
    assert schema["required"] == ["benchmark", "rules", "targets"]


def test_load_json_text(mixed_summary) -> None:
    data = load_summary_text(json.dumps(mixed_summary))
    assert data == mixed_summary


def test_load_yaml_text(mixed_summary) -> None:
    data = load_summary_text(yaml.safe_dump(mixed_summary), fmt="yaml")
    assert data == mixed_summary


def test_invalid_json() -> None:
    with pytest.raises(InvalidDocumentError, match="Invalid JSON"):
        load_summary_text("{ invalid json }")


def test_empty_document() -> None:
    with pytest.raises(InvalidDocumentError, match="empty"):
        load_summary_text("", fmt="yaml")


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(InvalidDocumentError, match="dictionary"):
        load_summary_text("[1, 2, 3]")


@pytest.mark.parametrize("section", ["benchmark", "rules", "targets"])
def test_missing_section(mixed_summary, section: str) -> None:
    del mixed_summary[section]
    with pytest.raises(InvalidDocumentError, match=section):
        validate_summary(mixed_summary)


def test_schema_violation_names_location(mixed_summary) -> None:
    del mixed_summary["targets"][1]["friendly_name"]
    with pytest.raises(InvalidDocumentError, match="targets/1"):
        validate_summary(mixed_summary)


def test_out_of_range_ordinal_passes_schema(mixed_summary) -> None:
    # Ordinal range is checked while building the model, with rule/target names
    mixed_summary["targets"][0]["rule_results"][2] = 42
    validate_summary(mixed_summary)


def test_load_summary_file(tmp_path: Path, mixed_summary) -> None:
    path = tmp_path / "scan.json"
    path.write_text(json.dumps(mixed_summary))
    model = load_summary(path)
    assert len(model.rules) == 3
    assert len(model.targets) == 4
    assert model.benchmark.profile_name == "Baseline"


def test_load_summary_yaml_file(tmp_path: Path, mixed_summary) -> None:
    path = tmp_path / "scan.yml"
    path.write_text(yaml.safe_dump(mixed_summary))
    assert load_summary(path).targets[0].friendly_name == "web-01"


def test_load_summary_bad_ordinal(tmp_path: Path, mixed_summary) -> None:
    mixed_summary["targets"][0]["rule_results"][2] = 42
    path = tmp_path / "scan.json"
    path.write_text(json.dumps(mixed_summary))
    with pytest.raises(MalformedResultError, match="rule3"):
        load_summary(path)


def test_load_summary_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Summary file not found"):
        load_summary(tmp_path / "missing.json")


def test_load_summary_boolean_ordinal(tmp_path: Path, mixed_summary) -> None:
    mixed_summary["targets"][1]["rule_results"][1] = True
    path = tmp_path / "scan.json"
    path.write_text(json.dumps(mixed_summary))
    with pytest.raises(MalformedResultError, match="rule2") as exc_info:
        load_summary(path)
    assert exc_info.value.target_name == "web-02"
