"""Map embed URL for a free-text location."""

from urllib.parse import quote

DEFAULT_MAP_QUERY = "City Center"


def map_embed_url(location: str | None, base_url: str = "https://www.google.com/maps") -> str:
    """Embed URL searching for location (City Center when empty)."""
    query = (location or "").strip() or DEFAULT_MAP_QUERY
    return f"{base_url}?q={quote(query, safe='')}&output=embed"
