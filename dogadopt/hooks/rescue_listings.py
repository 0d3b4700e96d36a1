"""
Rescue listings hook.
"""

from typing import List, Optional
from loguru import logger

from ..exceptions import FetchError
from ..schemas.rescue_data import Rescue
from ..utils.api_clients import SupabaseClient, supabase_client
from ..utils.helpers import parse_rescue_rows


RESCUES_TABLE = "rescues"


class RescueListingFetcher:
    """Fetches every rescue organisation in alphabetical order."""

    query_key = ("rescues",)

    def __init__(self, client: Optional[SupabaseClient] = None):
        self.client = client or supabase_client

    async def fetch(self) -> List[Rescue]:
        """
        Read all rescues ordered by name ascending.

        Raises:
            FetchError: If the query fails or any row is malformed
        """
        logger.info("Fetching rescue listings")

        response = await (
            self.client.table(RESCUES_TABLE)
            .select("*")
            .order("name", ascending=True)
            .execute()
        )

        if response.error is not None:
            logger.error(f"Error fetching rescues: {response.error}")
            raise FetchError(self.query_key, response.error)

        try:
            rescues = parse_rescue_rows(response.data or [])
        except ValueError as e:
            logger.error(f"Malformed rescue row: {e}")
            raise FetchError(self.query_key, e) from e

        logger.info(f"Found {len(rescues)} rescues")
        return rescues


async def fetch_rescues(client: Optional[SupabaseClient] = None) -> List[Rescue]:
    """Fetch rescue listings with a one-off fetcher."""
    return await RescueListingFetcher(client).fetch()
