"""Achievements app: badge catalog, earned records and the evaluation engine."""
