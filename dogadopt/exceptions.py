"""
Exceptions raised by dogadopt data fetchers.
"""

from typing import Any, Tuple


class FetchError(Exception):
    """
    A read against the listings database failed.

    Raised instead of returning a partial or default result. The original
    cause (a PostgrestError from the query service or a pydantic
    ValidationError for a malformed row) is kept on ``cause``.
    """

    def __init__(self, query_key: Tuple[str, ...], cause: Any):
        self.query_key = query_key
        self.cause = cause
        super().__init__(f"Failed to fetch {'/'.join(query_key)}: {cause}")
