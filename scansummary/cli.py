"""Command-line interface for scansummary."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from scansummary.aggregate import aggregate
from scansummary.config import DUPLICATES_ERROR, DUPLICATES_LAST_WINS, AggregationConfig
from scansummary.dsl.loader import load_summary
from scansummary.logging import get_logger, set_global_log_level
from scansummary.model.report import ReportModel
from scansummary.tables import COUNT_COLUMNS, rule_rows, target_rows
from scansummary.types.base import Category, Outcome
from scansummary.utils.output_paths import (
    ensure_parent_dir,
    report_path_for_run,
    table_paths_for_run,
)

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 6,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows.
        min_width: Minimum column width.
        max_col_width: Clip cells longer than this, with an ASCII ellipsis.

    Returns:
        Formatted table string, or "" when there are no rows.
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(row[col_idx]) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _outcome_arg(value: str) -> Outcome:
    try:
        return Outcome.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _load_and_aggregate(
    path: Path, last_wins: bool, missing_outcome: Outcome = Outcome.ERROR
) -> ReportModel:
    config = AggregationConfig(
        duplicate_targets=DUPLICATES_LAST_WINS if last_wins else DUPLICATES_ERROR,
        missing_outcome=missing_outcome,
    )
    return aggregate(load_summary(path), config)


_COUNT_HEADERS = ["Pass", "Fail", "Unknown", "N/A"]


def _print_distribution(model: ReportModel) -> None:
    n_rules = len(model.rules)
    n_targets = len(model.targets)
    print(
        f"\n📊 Results summary ({n_rules} {_plural(n_rules, 'rule')}, "
        f"{n_targets} {_plural(n_targets, 'target')})"
    )
    rows = [
        [c.label, model.rule_result_totals[c], model.target_result_totals[c]]
        for c in Category
    ]
    print(_format_table(["Category", "Rules", "Targets"], rows))


def _print_details(model: ReportModel) -> None:
    rules = rule_rows(model)
    print("\n📋 Results by rule")
    print(
        _format_table(
            ["#", "Rule", "Category", *_COUNT_HEADERS],
            [
                [pos, row["title"] or row["id"], row["category"]]
                + [row[c] for c in COUNT_COLUMNS]
                for pos, row in rules.iterrows()
            ],
            max_col_width=48,
        )
    )

    targets = target_rows(model)
    print("\n🖥️  Results by target")
    print(
        _format_table(
            ["#", "Target", "Category", *_COUNT_HEADERS],
            [
                [pos, row["friendly_name"], row["category"]]
                + [row[c] for c in COUNT_COLUMNS]
                for pos, row in targets.iterrows()
            ],
            max_col_width=48,
        )
    )

    failing = [t for t in model.targets if t.status_detail or t.error_trace]
    if failing:
        print("\n⚠️  Targets with errors")
        for target in failing:
            print(f"   {target.friendly_name}: {target.status_detail or ''}")
            errored = len(target.rules_by_result[Outcome.ERROR])
            if errored:
                print(f"      {errored} {_plural(errored, 'rule')} marked ERROR")


def _inspect_summary(
    path: Path,
    detail: bool = False,
    last_wins: bool = False,
    missing_outcome: Outcome = Outcome.ERROR,
) -> None:
    """Load, aggregate and print a summary without writing files."""
    logger.info(f"Inspecting summary: {path}")
    try:
        model = _load_and_aggregate(path, last_wins, missing_outcome)
    except FileNotFoundError:
        logger.error(f"Summary file not found: {path}")
        print(f"❌ ERROR: Summary file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect summary: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to inspect summary: {type(e).__name__}: {e}")
        sys.exit(1)

    bench = model.benchmark
    print("🔎 Benchmark")
    print(f"   Benchmark: {bench.display_title}" + (f" ({bench.id})" if bench.id else ""))
    print(f"   Profile:   {bench.profile_name}")
    _print_distribution(model)
    if detail:
        _print_details(model)


def _run_summary(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
    csv: bool = False,
    last_wins: bool = False,
    missing_outcome: Outcome = Outcome.ERROR,
    output_dir: Optional[Path] = None,
) -> None:
    """Aggregate a summary file and export the report model as JSON.

    Args:
        path: Summary JSON or YAML file.
        results_override: Explicit path for the report JSON. Defaults to
            ``<summary_stem>.report.json``, under ``output_dir`` if provided.
        no_results: Skip writing the report JSON.
        stdout: Also print the report JSON to stdout.
        csv: Also write rule and target tables as CSV.
        last_wins: Let later targets replace earlier ones with the same name.
        missing_outcome: Outcome recorded for targets that were not evaluated.
        output_dir: Base directory for generated artifacts.
    """
    logger.info(f"Loading summary from: {path}")
    _start_time = perf_counter()

    try:
        model = _load_and_aggregate(path, last_wins, missing_outcome)
        json_str = json.dumps(model.to_dict(), indent=2)

        if not no_results:
            effective_output = report_path_for_run(path, output_dir, results_override)
            ensure_parent_dir(effective_output)
            logger.info(f"Writing report to: {effective_output}")
            effective_output.write_text(json_str, encoding="utf-8")
            if not stdout:
                print(f"✅ Report written to: {effective_output}")

        if csv:
            rules_csv, targets_csv = table_paths_for_run(path, output_dir)
            ensure_parent_dir(rules_csv)
            rule_rows(model).to_csv(rules_csv)
            target_rows(model).to_csv(targets_csv)
            logger.info(f"Tables written to: {rules_csv}, {targets_csv}")
            if not stdout:
                print(f"✅ Tables written to: {rules_csv}, {targets_csv}")

        if stdout:
            print(json_str)

        _elapsed = perf_counter() - _start_time
        logger.info(f"Aggregation completed in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        logger.error(f"Summary file not found: {path}")
        print(f"❌ ERROR: Summary file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to aggregate summary: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to aggregate summary: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``scansummary`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="scansummary",
        description="Aggregate compliance scan summaries into a categorized report model.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Aggregate a summary and export it")
    run_parser.add_argument("summary", type=Path, help="Path to summary JSON or YAML")
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help=(
            "Export the report to this JSON file (default: <summary_name>.report.json;"
            " placed under --output when provided)"
        ),
    )
    run_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable report file generation",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the report JSON to stdout",
    )
    run_parser.add_argument(
        "--csv",
        action="store_true",
        help="Also write per-rule and per-target tables as CSV",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Print the category distribution of a summary"
    )
    inspect_parser.add_argument(
        "summary", type=Path, help="Path to summary JSON or YAML"
    )
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show per-rule and per-target tables",
    )

    for p in (run_parser, inspect_parser):
        p.add_argument(
            "--last-wins",
            action="store_true",
            help=(
                "Allow duplicate target names; the later target replaces the"
                " earlier one in cross-links"
            ),
        )
        p.add_argument(
            "--missing-outcome",
            type=_outcome_arg,
            default=Outcome.ERROR,
            metavar="OUTCOME",
            help=(
                "Outcome recorded for every rule of a target that could not be"
                " evaluated (default: ERROR)"
            ),
        )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory for generated artifacts",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_summary(
            path=args.summary,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
            csv=args.csv,
            last_wins=args.last_wins,
            missing_outcome=args.missing_outcome,
            output_dir=args.output,
        )
    elif args.command == "inspect":
        _inspect_summary(
            args.summary, args.detail, args.last_wins, args.missing_outcome
        )


if __name__ == "__main__":
    main()
