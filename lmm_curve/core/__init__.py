"""Curve storage, conversions, validation and random sources."""
