"""
Unit tests for the shared store client
"""
import threading
from unittest.mock import MagicMock, patch

import pytest

from backoffice.core import database
from backoffice.core.config import settings


@pytest.fixture
def configured(monkeypatch):
    """Supabase credentials present, no cached client"""
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", "service-role-key")
    database.reset_supabase()
    yield
    database.reset_supabase()


class TestGetSupabase:
    """Test lazy singleton creation"""

    def test_client_is_created_once(self, configured):
        with patch("backoffice.core.database.create_client", return_value=MagicMock()) as create:
            first = database.get_supabase()
            second = database.get_supabase()

        assert first is second
        create.assert_called_once_with("https://example.supabase.co", "service-role-key")

    def test_concurrent_first_use_builds_one_client(self, configured):
        """Threads racing on the first call all get the same client"""
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(database.get_supabase())

        with patch("backoffice.core.database.create_client", side_effect=lambda *args: MagicMock()) as create:
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert create.call_count == 1
        assert len(results) == 8
        assert all(client is results[0] for client in results)

    def test_reset_builds_a_new_client(self, configured):
        with patch("backoffice.core.database.create_client", side_effect=lambda *args: MagicMock()):
            first = database.get_supabase()
            database.reset_supabase()
            second = database.get_supabase()

        assert first is not second

    @pytest.mark.parametrize("attribute", ["SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"])
    def test_missing_credentials(self, configured, monkeypatch, attribute):
        monkeypatch.setattr(settings, attribute, "")

        with patch("backoffice.core.database.create_client") as create:
            with pytest.raises(RuntimeError, match="Missing Supabase environment variables"):
                database.get_supabase()

        create.assert_not_called()
