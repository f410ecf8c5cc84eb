"""Model clients and observability helpers."""
