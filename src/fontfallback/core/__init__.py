"""Fallback font metrics: name normalization, lookup and adjustment."""
