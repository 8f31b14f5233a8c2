"""
Store client (Supabase)

A single Supabase client is shared by the whole process. It is created lazily
on first use and guarded by a lock so concurrent first requests cannot build
two clients. The client itself is safe to share between request threads.
"""
import logging
import threading
from typing import Optional

from supabase import Client, create_client

from .config import settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None
_client_lock = threading.Lock()


def get_supabase() -> Client:
    """
    Return the process-wide Supabase client, creating it on first call.

    Also used as a FastAPI dependency:

        @router.get("/data")
        def get_data(client: Client = Depends(get_supabase)):
            ...

    Raises:
        RuntimeError: if SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not configured
    """
    global _client

    if _client is None:
        with _client_lock:
            if _client is None:
                if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
                    raise RuntimeError("Missing Supabase environment variables")

                _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
                logger.info(f"Supabase client initialized for {settings.SUPABASE_URL}")

    return _client


def reset_supabase() -> None:
    """Drop the cached client (next get_supabase() call builds a new one)"""
    global _client

    with _client_lock:
        _client = None
