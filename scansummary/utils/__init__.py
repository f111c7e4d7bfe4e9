"""Utility helpers used across scansummary.

Small, self-contained modules that do not depend on project internals.
"""
