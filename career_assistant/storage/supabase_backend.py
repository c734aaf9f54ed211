"""
Supabase backend - table storage through the PostgREST API.

Requests carry the project's anon key in the ``apikey`` header and, once a
user has signed in, the user's access token as the bearer token so that row
level security scopes every query to that user.
"""

from typing import Optional

import requests

from .base import Backend
from career_assistant.core.errors import BackendError


# PostgREST / Postgres codes for a table that does not exist
MISSING_TABLE_CODES = {"42P01", "PGRST205"}


class SupabaseBackend(Backend):
    """PostgREST table storage."""

    def __init__(
        self,
        url: str,
        anon_key: str,
        access_token: Optional[str] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the backend.

        Args:
            url: Project URL (e.g. https://xyz.supabase.co)
            anon_key: Project anon (public) key
            access_token: Signed-in user's JWT
            timeout: Request timeout in seconds
            session: requests session to use
        """
        super().__init__()
        if not url or not anon_key:
            raise BackendError(
                "Missing Supabase settings. Set SUPABASE_URL and SUPABASE_ANON_KEY "
                "or run 'career-assistant config --set backend.url ...'."
            )
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self.access_token = access_token
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def name(self) -> str:
        return "Supabase"

    def set_access_token(self, token: Optional[str]) -> None:
        """Use a user's token for subsequent requests (None for anonymous)."""
        self.access_token = token

    def headers(self, prefer: Optional[str] = None) -> dict:
        headers = {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {self.access_token or self.anon_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    @staticmethod
    def _filter_params(filters: Optional[dict]) -> dict:
        params = {}
        for column, value in (filters or {}).items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[column] = f"eq.{value}"
        return params

    def _request(
        self,
        method: str,
        table: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
        prefer: Optional[str] = None,
    ):
        url = f"{self.url}/rest/v1/{table}"
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                headers=self.headers(prefer),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.error(f"{method} {table} failed: {e}")
            raise BackendError(f"Could not reach the database: {e}") from e

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = body.get("message") or response.text or f"HTTP {response.status_code}"
            code = body.get("code")
            self.logger.error(f"{method} {table} returned {response.status_code}: {message}")
            raise BackendError(message, code=code, status=response.status_code)

        if not response.content:
            return []
        return response.json()

    def select(
        self,
        table: str,
        filters: Optional[dict] = None,
        order: Optional[str] = None,
        desc: bool = False,
        limit: Optional[int] = None,
    ) -> list[dict]:
        params = {"select": "*"}
        params.update(self._filter_params(filters))
        if order:
            params["order"] = f"{order}.{'desc' if desc else 'asc'}"
        if limit is not None:
            params["limit"] = str(limit)
        return self._request("GET", table, params=params)

    def insert(self, table: str, row: dict) -> dict:
        rows = self._request("POST", table, json=row, prefer="return=representation")
        self.logger.debug(f"Inserted into {table}")
        return rows[0] if rows else dict(row)

    def upsert(self, table: str, row: dict, on_conflict: str = "id") -> dict:
        rows = self._request(
            "POST",
            table,
            params={"on_conflict": on_conflict},
            json=row,
            prefer="resolution=merge-duplicates,return=representation",
        )
        self.logger.debug(f"Upserted into {table} on {on_conflict}")
        return rows[0] if rows else dict(row)

    def update(self, table: str, values: dict, filters: dict) -> list[dict]:
        return self._request(
            "PATCH",
            table,
            params=self._filter_params(filters),
            json=values,
            prefer="return=representation",
        )

    def delete(self, table: str, filters: dict) -> int:
        rows = self._request(
            "DELETE",
            table,
            params=self._filter_params(filters),
            prefer="return=representation",
        )
        return len(rows)

    def table_exists(self, table: str) -> bool:
        try:
            self._request("GET", table, params={"select": "*", "limit": "0"})
        except BackendError as e:
            if e.code in MISSING_TABLE_CODES or e.status == 404:
                return False
            raise
        return True
