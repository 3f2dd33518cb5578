"""Shared helpers: pattern rendering, plural selection, metrics."""
