"""Reporting and export helpers for any-two agreement results.

This package turns pairwise results from :mod:`any_two` into console
summaries and CSV tables. It is installed via the editable ``src/`` package
layout.
"""
