"""Stylist agents."""
