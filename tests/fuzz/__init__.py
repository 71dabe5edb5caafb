"""Fuzz targets for external conversion commands.

This package contains:
- test_external_conformance: Hypothesis-driven invariant checks against the
  command named by DATESTAMPS_FUZZ_OPTIONS

Python 3.13+.
"""
