"""Web surface for the stylist."""
