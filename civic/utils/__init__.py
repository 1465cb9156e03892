"""Shared utilities (ids, clock, map embed URL)."""

from civic.utils.ids import new_id, now_ms, to_base36
from civic.utils.maps import DEFAULT_MAP_QUERY, map_embed_url

__all__ = [
    "DEFAULT_MAP_QUERY",
    "map_embed_url",
    "new_id",
    "now_ms",
    "to_base36",
]
