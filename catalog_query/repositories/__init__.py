"""
Repository layer for catalog data access.

Repositories load a record source once at construction and answer read-only
queries over the in-memory collection with linear scans.
"""
