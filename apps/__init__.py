"""Snackbox Django apps."""
