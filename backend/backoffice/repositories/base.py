"""
Base repository

Wraps query execution so that every repository follows the same policy:
not-found is an empty result, failures are logged here and raised as
StoreError (store-reported) or StoreUnavailableError (transport).
"""
import logging
from typing import Any, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from backoffice.core.database import get_supabase
from backoffice.core.exceptions import StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Common plumbing for the Supabase-backed repositories"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client if client is not None else get_supabase()

    def _execute(self, query, action: str):
        """
        Run a PostgREST query or RPC builder

        Args:
            query: Builder returned by client.table(...) or client.rpc(...)
            action: Human description used in logs and error messages ("fetching customers")

        Raises:
            StoreError: the store rejected the query
            StoreUnavailableError: the store could not be reached
        """
        try:
            return query.execute()
        except APIError as e:
            message = e.message or f"Error {action}"
            logger.error(f"Error {action}: {message} (code={e.code})")
            raise StoreError(message, code=e.code) from e
        except httpx.HTTPError as e:
            logger.error(f"Store unreachable while {action}: {e}")
            raise StoreUnavailableError(f"Store unavailable while {action}") from e

    def _rows(self, query, action: str) -> List[dict]:
        response = self._execute(query, action)
        return response.data or []

    def _first(self, query, action: str) -> Optional[dict]:
        """Single row or None; RPCs returning a composite come back as a dict"""
        data = self._execute(query, action).data
        if not data:
            return None
        if isinstance(data, list):
            return data[0]
        return data

    @staticmethod
    def _require(row: Optional[Any], action: str) -> Any:
        """Writes must echo the written row back"""
        if row is None:
            logger.error(f"Error {action}: store returned no row")
            raise StoreError(f"Failed {action}")
        return row
