"""Report model classes."""

from scansummary.model.report import Benchmark, Reference, ReportModel, Rule, Target

__all__ = ["Benchmark", "Reference", "ReportModel", "Rule", "Target"]
