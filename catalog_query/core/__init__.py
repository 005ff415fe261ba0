"""
Core application utilities shared by repositories and the entry point.

This package provides:
- Application settings (data file location, logging level, load strictness)
- Logging configuration with a data-source context filter
- The error taxonomy raised while loading and querying the catalog
"""
