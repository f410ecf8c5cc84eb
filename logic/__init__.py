"""Prompting, validation and lifecycle logic."""
