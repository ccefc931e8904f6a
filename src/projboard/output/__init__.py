"""Presentation layer — rich rendering of results and the two-column board."""
