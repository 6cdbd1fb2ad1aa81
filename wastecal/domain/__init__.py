"""Conversion pipeline orchestration."""
