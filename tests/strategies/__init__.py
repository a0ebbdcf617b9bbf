"""Hypothesis strategies for cldrnames tests."""
