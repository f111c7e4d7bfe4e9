"""Utilities for building CLI artifact output paths.

Paths are built from an optional output directory, a prefix derived from the
summary file name, and a per-artifact suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def summary_prefix_from_path(summary_path: Path) -> str:
    """Return the summary filename stem, used as the artifact prefix."""
    return summary_path.stem


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def build_artifact_path(output_dir: Optional[Path], prefix: str, suffix: str) -> Path:
    """Compose an artifact path as output_dir / (prefix + suffix).

    If ``output_dir`` is None, the path is relative to the current working
    directory.

    Args:
        output_dir: Base directory for outputs; if None, use CWD.
        prefix: Filename prefix.
        suffix: Per-artifact suffix including the dot (e.g. ".report.json").
    """
    if output_dir is None:
        return Path(f"{prefix}{suffix}")
    return output_dir / f"{prefix}{suffix}"


def resolve_override_path(
    override: Optional[Path], output_dir: Optional[Path]
) -> Optional[Path]:
    """Resolve an override path with respect to an optional output directory.

    - Absolute override paths are returned as-is.
    - Relative override paths are interpreted relative to ``output_dir``
      when provided; otherwise relative to the current working directory.
    """
    if override is None:
        return None
    if override.is_absolute():
        return override
    if output_dir is not None:
        return output_dir / override
    return override


def report_path_for_run(
    summary_path: Path,
    output_dir: Optional[Path],
    results_override: Optional[Path],
) -> Path:
    """Determine the aggregated report JSON path for the ``run`` command.

    Behavior:
    - If ``results_override`` is provided, return it (resolved relative to
      ``output_dir`` when that is specified).
    - Otherwise return ``<summary_stem>.report.json``, under ``output_dir``
      when provided.
    """
    resolved_override = resolve_override_path(results_override, output_dir)
    if resolved_override is not None:
        return resolved_override
    return build_artifact_path(
        output_dir, summary_prefix_from_path(summary_path), ".report.json"
    )


def table_paths_for_run(
    summary_path: Path, output_dir: Optional[Path]
) -> tuple[Path, Path]:
    """Return the (rules, targets) CSV paths for ``run --csv``."""
    prefix = summary_prefix_from_path(summary_path)
    return (
        build_artifact_path(output_dir, prefix, ".rules.csv"),
        build_artifact_path(output_dir, prefix, ".targets.csv"),
    )
