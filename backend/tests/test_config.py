"""
Bookmarker — Configuration Tests
================================

What:  Validation rules of the Settings model.
"""

import pytest
from pydantic import ValidationError

from bookmarker.config import Settings


class TestSettings:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(log_level="chatty")

    def test_user_prefix_trailing_slash_stripped(self):
        assert Settings(user_prefix="/users/").user_prefix == "/users"

    @pytest.mark.parametrize("prefix", ["user", "/", ""])
    def test_invalid_user_prefix_rejected(self, prefix):
        with pytest.raises(ValidationError):
            Settings(user_prefix=prefix)

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///./dev.db").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@db/bookmarker").is_sqlite

    def test_rate_limit_is_off_by_default(self, monkeypatch):
        monkeypatch.delenv("RATE_LIMIT_REQUESTS", raising=False)

        assert Settings(_env_file=None).rate_limit_requests is None

    def test_rate_limit_bounds_enforced(self):
        with pytest.raises(ValidationError):
            Settings(rate_limit_requests=5)
