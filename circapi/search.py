"""
Search and filter query-string construction.

    build_search_query("web servers", {"f_tags_has": ["dc:sfo1"]})
    -> "search=web+servers&f_tags_has=dc%3Asfo1"
"""

from typing import Dict, List, Optional, Tuple
from urllib.parse import urlencode

# filter field name -> allowed values, e.g. {"f_tags_has": ["dc:sfo1", "os:linux"]}
SearchFilter = Dict[str, List[str]]


def build_search_query(search: Optional[str] = None, filters: Optional[SearchFilter] = None) -> str:
    """
    Build the URL-encoded query string for a collection search.

    The search term comes first, then one pair per (field, value). Fields are
    emitted in sorted order so the same criteria always produce the same URL;
    values keep their list order. Multiple values for a field become repeated
    parameters, which the service ORs within the field and ANDs across fields.

    Returns:
        Encoded query string, "" if there is nothing to search for
    """
    pairs: List[Tuple[str, str]] = []
    if search:
        pairs.append(("search", search))
    for field in sorted(filters or {}):
        for value in filters[field]:
            pairs.append((field, value))
    return urlencode(pairs)
