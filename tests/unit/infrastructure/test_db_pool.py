"""
Name: Database Pool Tests

Responsibilities:
  - Test pool lifecycle (init, get, close, reset)
  - Test per-connection statement_timeout configuration
  - Test repository pool resolution (injected vs global)

Notes:
  - Uses mocking for ConnectionPool (no real DB)
"""

from unittest.mock import MagicMock, patch

import pytest

from app.infrastructure.db.pool import (
    _configure_connection,
    close_pool,
    get_pool,
    init_pool,
    is_pool_initialized,
    reset_pool,
)
from app.infrastructure.repositories import PostgresUserRepository

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_pool():
    reset_pool()
    yield
    reset_pool()


@pytest.fixture
def mock_pool():
    with patch("app.infrastructure.db.pool.ConnectionPool") as MockPool:
        pool = MagicMock()
        MockPool.return_value = pool
        yield MockPool, pool


class TestPoolLifecycle:
    def test_init_pool_creates_pool(self, mock_pool):
        MockPool, pool = mock_pool

        result = init_pool("postgresql://test", min_size=2, max_size=10)

        MockPool.assert_called_once()
        kwargs = MockPool.call_args.kwargs
        assert kwargs["conninfo"] == "postgresql://test"
        assert kwargs["min_size"] == 2
        assert kwargs["max_size"] == 10
        assert result is pool
        assert is_pool_initialized()

    def test_init_pool_twice_raises_error(self, mock_pool):
        init_pool("postgresql://test", min_size=2, max_size=10)

        with pytest.raises(RuntimeError, match="already initialized"):
            init_pool("postgresql://test", min_size=2, max_size=10)

    def test_get_pool_without_init_raises_error(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_pool()

    def test_close_pool_clears_singleton(self, mock_pool):
        _, pool = mock_pool
        init_pool("postgresql://test", min_size=2, max_size=10)

        close_pool()

        pool.close.assert_called_once()
        assert not is_pool_initialized()
        with pytest.raises(RuntimeError, match="not initialized"):
            get_pool()

    def test_close_pool_is_idempotent(self):
        close_pool()
        close_pool()

    def test_reset_pool_swallows_close_errors_and_allows_reinit(self, mock_pool):
        _, pool = mock_pool
        pool.close.side_effect = RuntimeError("already closed")
        init_pool("postgresql://test", min_size=2, max_size=10)

        reset_pool()

        init_pool("postgresql://test", min_size=2, max_size=10)


class TestConfigureConnection:
    def test_sets_statement_timeout(self, monkeypatch):
        from app.crosscutting.config import get_settings

        monkeypatch.setenv("DB_STATEMENT_TIMEOUT_MS", "1500")
        get_settings.cache_clear()
        conn = MagicMock()

        _configure_connection(conn)

        conn.execute.assert_called_once_with("SET statement_timeout = 1500")
        conn.commit.assert_called_once()

    def test_zero_disables_timeout(self, monkeypatch):
        from app.crosscutting.config import get_settings

        monkeypatch.setenv("DB_STATEMENT_TIMEOUT_MS", "0")
        get_settings.cache_clear()
        conn = MagicMock()

        _configure_connection(conn)

        conn.execute.assert_not_called()


class TestRepositoryPoolUsage:
    def test_repository_uses_injected_pool(self):
        pool = MagicMock()

        assert PostgresUserRepository(pool=pool)._get_pool() is pool

    def test_repository_falls_back_to_global_pool(self, mock_pool):
        _, pool = mock_pool
        init_pool("postgresql://test", min_size=2, max_size=10)

        assert PostgresUserRepository()._get_pool() is pool
