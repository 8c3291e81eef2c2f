"""Mutation testing reports: mutant statuses, per-mutant lines, run summaries, thresholds and JSON output."""

__version__ = "0.1.0"