"""
Dog listings hook - reads every dog with its rescue organisation.
"""

from typing import List, Optional
from loguru import logger

from ..exceptions import FetchError
from ..schemas.dog_data import Dog
from ..utils.api_clients import SupabaseClient, supabase_client
from ..utils.helpers import parse_dog_rows


DOGS_TABLE = "dogs"
DOGS_SELECT = """
    *,
    rescues (
        id,
        name,
        region,
        website
    )
"""


class DogListingFetcher:
    """
    Fetches dog listings joined with their rescue, newest first.

    Caching and refetching belong to whatever query layer calls fetch();
    query_key identifies the result in that cache.
    """

    query_key = ("dogs",)

    def __init__(self, client: Optional[SupabaseClient] = None):
        self.client = client or supabase_client

    async def fetch(self) -> List[Dog]:
        """
        Read all dogs ordered by created_at descending.

        Returns:
            List of Dog objects in the order the database returned them

        Raises:
            FetchError: If the query fails or any row is malformed
        """
        logger.info("Fetching dog listings")

        response = await (
            self.client.table(DOGS_TABLE)
            .select(DOGS_SELECT)
            .order("created_at", ascending=False)
            .execute()
        )

        if response.error is not None:
            logger.error(f"Error fetching dogs: {response.error}")
            raise FetchError(self.query_key, response.error)

        try:
            dogs = parse_dog_rows(response.data or [])
        except ValueError as e:
            logger.error(f"Malformed dog row: {e}")
            raise FetchError(self.query_key, e) from e

        logger.info(f"Found {len(dogs)} dogs")
        return dogs


async def fetch_dogs(client: Optional[SupabaseClient] = None) -> List[Dog]:
    """Fetch dog listings with a one-off fetcher."""
    return await DogListingFetcher(client).fetch()
