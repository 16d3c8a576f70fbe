"""Scoring pipeline stages and the report service."""
