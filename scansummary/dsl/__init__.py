"""Loading and validation of scan summary documents.

Parse a JSON or YAML summary with
`scansummary.dsl.loader.load_summary_text` and build a
`scansummary.model.report.ReportModel` from the result.
"""
