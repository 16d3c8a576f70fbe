"""Pydantic models for attempts, questions and reports."""
