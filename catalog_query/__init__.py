"""
In-memory query layer over a static catalog of LEGO sets.

The catalog is loaded once from a JSON data file into a read-only repository
which answers simple aggregate and filter questions about it.
"""
