"""CoutureMind application package."""
