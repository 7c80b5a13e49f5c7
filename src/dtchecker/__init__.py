"""Validate and format calendar dates."""
