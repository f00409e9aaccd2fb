"""Purchases app: snack purchases, scanned items and payments."""
