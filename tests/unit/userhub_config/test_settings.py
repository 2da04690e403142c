"""Unit tests for Settings."""

from pydantic import SecretStr
from sqlalchemy.engine import make_url


class TestDatabaseUrl:
    """Tests for the computed database URL."""

    def test_explicit_dsn_wins(self, make_settings):
        settings = make_settings(database_dsn="sqlite+aiosqlite:///./data/app.db")

        assert settings.database_url == "sqlite+aiosqlite:///./data/app.db"

    def test_built_from_postgres_parts(self, make_settings):
        settings = make_settings(
            database_dsn=None,
            postgres_host="db.internal",
            postgres_port=5433,
            postgres_user="userhub",
            postgres_password=SecretStr("secret"),
            postgres_db="users",
        )

        url = make_url(settings.database_url)
        assert url.drivername == "postgresql+asyncpg"
        assert url.host == "db.internal"
        assert url.port == 5433
        assert url.username == "userhub"
        assert url.password == "secret"
        assert url.database == "users"

    def test_reserved_characters_in_credentials_survive(self, make_settings):
        settings = make_settings(
            database_dsn=None,
            postgres_host="db.internal",
            postgres_user="app:user",
            postgres_password=SecretStr("p@ss/w:rd%"),
        )

        url = make_url(settings.database_url)
        assert url.username == "app:user"
        assert url.password == "p@ss/w:rd%"
        assert url.host == "db.internal"

    def test_asyncpg_connect_args(self, make_settings):
        settings = make_settings(database_dsn=None, postgres_timezone="Europe/Berlin")

        args = settings.database_connect_args
        assert args["server_settings"] == {"timezone": "Europe/Berlin"}

    def test_sqlite_has_no_connect_args(self, make_settings):
        settings = make_settings(database_dsn="sqlite+aiosqlite:///:memory:")

        assert settings.database_connect_args == {}


class TestCorsOrigins:
    def test_comma_separated(self, make_settings):
        settings = make_settings(
            api_cors_origins="http://a.example, http://b.example,",
        )

        assert settings.cors_origins == ["http://a.example", "http://b.example"]

    def test_empty_means_none(self, make_settings):
        assert make_settings(api_cors_origins="").cors_origins == []
