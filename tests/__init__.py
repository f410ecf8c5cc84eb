"""CoutureMind test suite."""
