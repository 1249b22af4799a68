"""
Fixed resolution constants shared by the resolver and HTTP client.
"""

from __future__ import annotations

# Tried in this order for every domain.
URL_PREFIXES: tuple[str, ...] = (
    "https://www.",
    "https://",
    "http://",
    "http://www.",
)

# <link> elements carrying a favicon reference, most specific first.
# Attribute matching is exact and case-sensitive.
FAVICON_LINK_PATTERNS: tuple[str, ...] = (
    "link[rel='shortcut icon'][href]",
    "link[rel='SHORTCUT ICON'][href]",
    "link[rel='icon'][href]",
)

# Substrings that mark an href as already absolute.
ABSOLUTE_HREF_MARKERS: tuple[str, ...] = ("http", "www.", ".com")

FAVICON_PATH = "/favicon.ico"

FAILED_SENTINEL = "FAILED"

# Browser-like headers; some hosts reject obvious bot traffic.
HEADER_ACCEPT = "image/avif,image/webp,image/apng,image/svg+xml,image/*,*/*;q=0.8"
HEADER_ACCEPT_LANGUAGE = "en-CA,en-GB;q=0.9,en-US;q=0.8,en;q=0.7"
HEADER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"

OUTPUT_FIELDNAMES: tuple[str, ...] = ("rank", "domain", "favicon_url")
