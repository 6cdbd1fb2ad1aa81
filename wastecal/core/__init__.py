"""Core infrastructure for wastecal: configuration, logging and exceptions."""
