"""TVDB record schemas.

``records`` holds the parsed (normalized) shapes and the records shared by
both families; ``raw_records`` holds the wire shapes of entities that need
normalization.
"""

from . import raw_records, records

__all__ = ["raw_records", "records"]
