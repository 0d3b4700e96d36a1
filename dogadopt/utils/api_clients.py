"""
External API clients for dogadopt.
Handles communication with the Supabase REST (PostgREST) endpoint that stores
dog and rescue listings.
"""

from typing import Any, Dict, List, Optional
import httpx
from loguru import logger
from pydantic import BaseModel, Field

from ..config import settings


class PostgrestError(BaseModel):
    """Error object returned in place of rows when a query fails."""

    message: str = Field(..., description="Human readable error message")
    code: Optional[str] = Field(default=None, description="PostgREST/Postgres error code")
    details: Optional[str] = Field(default=None)
    hint: Optional[str] = Field(default=None)
    status: Optional[int] = Field(default=None, description="HTTP status, None for transport errors")

    def __str__(self) -> str:
        prefix = f"[{self.code}] " if self.code else ""
        return f"{prefix}{self.message}"


class QueryResponse(BaseModel):
    """Result of a query: either rows or an error, never both."""

    data: Optional[List[Dict[str, Any]]] = None
    error: Optional[PostgrestError] = None


def _clean_columns(columns: str) -> str:
    """Strip whitespace from a select clause, except inside double quotes."""
    quoted = False
    cleaned = []
    for char in columns:
        if char.isspace() and not quoted:
            continue
        if char == '"':
            quoted = not quoted
        cleaned.append(char)
    return "".join(cleaned)


class QueryBuilder:
    """
    Read query against a single table.

    Usage:
        response = await client.table("dogs").select("*").order("created_at", ascending=False).execute()
    """

    def __init__(self, client: "SupabaseClient", table: str):
        self.client = client
        self.table = table
        self._columns = "*"
        self._order: List[str] = []

    def select(self, columns: str = "*") -> "QueryBuilder":
        """
        Set the column projection.

        Related tables are embedded with PostgREST syntax, e.g.
        ``"*, rescues(id, name)"`` follows the rescues foreign key.
        """
        self._columns = _clean_columns(columns) or "*"
        return self

    def order(self, column: str, ascending: bool = True) -> "QueryBuilder":
        """Order by a column. Repeated calls add secondary orderings."""
        direction = "asc" if ascending else "desc"
        self._order.append(f"{column}.{direction}")
        return self

    def build_params(self) -> Dict[str, str]:
        params = {"select": self._columns}
        if self._order:
            params["order"] = ",".join(self._order)
        return params

    async def execute(self) -> QueryResponse:
        return await self.client.get_rows(self.table, self.build_params())


class SupabaseClient:
    """Client for the Supabase REST API."""

    def __init__(
        self,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            url: Supabase project URL, defaults to settings.supabase_url
            api_key: Anonymous key, defaults to settings.supabase_anon_key
            http_client: Shared httpx AsyncClient; a short-lived one is
                opened per request when omitted
        """
        self.url = (url or settings.supabase_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.supabase_anon_key
        self._http_client = http_client

    def _get_headers(self) -> Dict[str, str]:
        """Get API request headers with authentication."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def table(self, name: str) -> QueryBuilder:
        """Start a query on a table."""
        return QueryBuilder(self, name)

    async def get_rows(self, table: str, params: Dict[str, str]) -> QueryResponse:
        """
        Run a GET against a table endpoint.

        Failures are reported through ``QueryResponse.error`` rather than raised,
        so callers decide how to surface them.

        Args:
            table: Table name
            params: PostgREST query parameters (select, order)

        Returns:
            QueryResponse with rows or an error
        """
        api_url = f"{self.url}/rest/v1/{table}"
        logger.debug(f"Supabase GET {api_url} with params: {params}")

        try:
            if self._http_client is not None:
                response = await self._http_client.get(
                    api_url,
                    params=params,
                    headers=self._get_headers(),
                    timeout=settings.api_timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=settings.api_timeout) as client:
                    response = await client.get(
                        api_url,
                        params=params,
                        headers=self._get_headers(),
                    )
        except httpx.HTTPError as e:
            logger.error(f"Supabase request to {table} failed: {e!r}")
            return QueryResponse(
                error=PostgrestError(message=str(e) or type(e).__name__, code=type(e).__name__)
            )
        except Exception as e:
            # InvalidURL and resolver errors wrapped in an ExceptionGroup land here
            logger.exception(f"Supabase request to {table} could not be sent: {e!r}")
            return QueryResponse(
                error=PostgrestError(message=str(e) or type(e).__name__, code=type(e).__name__)
            )

        if response.is_error:
            error = self._parse_error(response)
            logger.error(
                f"Supabase API error for {table}: {response.status_code}, "
                f"message='{error.message}', url='{response.url}'"
            )
            return QueryResponse(error=error)

        try:
            rows = response.json()
        except ValueError as e:
            logger.error(f"Supabase returned invalid JSON for {table}: {e}")
            return QueryResponse(
                error=PostgrestError(message="Invalid JSON in response", status=response.status_code)
            )

        if not isinstance(rows, list):
            logger.error(f"Supabase returned {type(rows).__name__} instead of a row list for {table}")
            return QueryResponse(
                error=PostgrestError(message="Expected a list of rows", status=response.status_code)
            )

        return QueryResponse(data=rows)

    @staticmethod
    def _parse_error(response: httpx.Response) -> PostgrestError:
        """Build a PostgrestError from an error response body."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            return PostgrestError(
                message=str(body.get("message") or response.reason_phrase),
                code=str(body["code"]) if body.get("code") is not None else None,
                details=body.get("details"),
                hint=body.get("hint"),
                status=response.status_code,
            )

        return PostgrestError(
            message=response.text or response.reason_phrase,
            status=response.status_code,
        )


# Singleton instance
supabase_client = SupabaseClient()
