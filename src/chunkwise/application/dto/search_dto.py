"""Search DTOs."""

from dataclasses import dataclass

DEFAULT_SEARCH_LIMIT = 5


@dataclass
class SearchInput:
    """Input for chunk search."""

    query: str
    limit: int = DEFAULT_SEARCH_LIMIT
