"""
Pydantic record shapes loaded by the repositories.

Field names match the keys of the JSON record source; deserialization is by
name, not by position.
"""

from .lego_set import LegoSet  # noqa: F401
