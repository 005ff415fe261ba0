"""Bundled record sources."""
