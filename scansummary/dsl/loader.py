"""JSON/YAML loader + schema validation for scan summary documents.

Provides a single entrypoint to parse summary text, run early shape checks
with readable messages, validate against the packaged JSON schema, and return
the document as a plain dictionary.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
import yaml

from scansummary.exceptions import InvalidDocumentError
from scansummary.logging import get_logger
from scansummary.model.report import ReportModel

logger = get_logger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}

_schema_cache: Optional[Dict[str, Any]] = None


def summary_schema() -> Dict[str, Any]:
    """Return the packaged summary JSON schema."""
    global _schema_cache
    if _schema_cache is None:
        with (
            resources.files("scansummary.schemas")
            .joinpath("summary.json")
            .open("r", encoding="utf-8")
        ) as f:
            _schema_cache = json.load(f)
    return _schema_cache


def validate_summary(data: Any) -> Dict[str, Any]:
    """Check the shape of a parsed summary document.

    Raises:
        InvalidDocumentError: If a required section is missing or the
            document does not match the schema.
    """
    if not isinstance(data, dict):
        raise InvalidDocumentError("The summary must map to a dictionary at top-level.")

    # Early checks give clearer messages than the schema validator
    missing = [k for k in ("benchmark", "rules", "targets") if k not in data]
    if missing:
        raise InvalidDocumentError(
            f"Summary document is missing required section(s): {', '.join(missing)}"
        )
    if not isinstance(data["benchmark"], dict):
        raise InvalidDocumentError("'benchmark' must be a mapping")
    for key in ("rules", "targets"):
        if not isinstance(data[key], list):
            raise InvalidDocumentError(f"'{key}' must be a list")

    try:
        jsonschema.validate(data, summary_schema())
    except jsonschema.ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise InvalidDocumentError(
            f"Summary document invalid at {where}: {exc.message}"
        ) from exc
    return data


def load_summary_text(text: str, fmt: str = "json") -> Dict[str, Any]:
    """Parse and validate summary text.

    Args:
        text: Document text.
        fmt: ``"json"`` or ``"yaml"``.

    Returns:
        The validated document.
    """
    try:
        if fmt == "yaml":
            data = yaml.safe_load(text)
        elif fmt == "json":
            data = json.loads(text)
        else:
            raise ValueError(f"Unsupported summary format: {fmt!r}")
    except json.JSONDecodeError as e:
        raise InvalidDocumentError(f"Invalid JSON in summary: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidDocumentError(f"Invalid YAML in summary: {e}") from e
    if data is None:
        raise InvalidDocumentError("Summary document is empty")
    return validate_summary(data)


def load_summary(path: Path) -> ReportModel:
    """Read a summary file and build its (not yet aggregated) report model.

    YAML is assumed for ``.yaml``/``.yml`` files, JSON otherwise.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidDocumentError: If the document is not a valid summary.
    """
    if not path.exists():
        raise FileNotFoundError(f"Summary file not found: {path}")
    fmt = "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"
    data = load_summary_text(path.read_text(encoding="utf-8"), fmt=fmt)
    model = ReportModel.from_dict(data)
    logger.info(
        f"Loaded {path.name}: {len(model.rules)} rules, {len(model.targets)} targets"
    )
    return model
