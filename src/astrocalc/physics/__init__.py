"""Numeric core: unit conversion tables and calendrical algorithms."""
