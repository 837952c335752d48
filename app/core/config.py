"""Application configuration management."""

from typing import Literal

from pydantic import AliasChoices, ConfigDict, Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

CLOUD_SQL_SOCKET_PREFIX = "/cloudsql/"
LOCAL_HOSTS = ("localhost", "127.0.0.1")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: Literal["development", "production", "test"] = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    service_name: str = "devfest-backend"
    log_level: str = "INFO"

    # HTTP
    port: int = Field(
        default=3001,
        validation_alias=AliasChoices("port", "backend_port"),
    )
    frontend_url: str = "http://localhost:3000"

    # Database
    database_url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the DB_* parts when set",
    )
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "devfest_user"
    db_password: str = ""
    db_name: str = "devfest_db"

    # Seeded greeting
    default_greeting: str = "Hello World from DevFest PTA 2025!"
    seed_greeting: bool = True

    # Application workflow
    enforce_status_workflow: bool = Field(
        default=False,
        description="Reject status changes not listed in the transition table",
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def uses_cloud_sql_socket(self) -> bool:
        return self.db_host.startswith(CLOUD_SQL_SOCKET_PREFIX)

    @property
    def sqlalchemy_url(self) -> URL:
        """Database URL for the async engine.

        A Cloud SQL host is a Unix socket directory, which asyncpg takes
        through the ``host`` query parameter instead of the netloc.
        """
        if self.database_url:
            return make_url(self.database_url)

        if self.uses_cloud_sql_socket:
            return URL.create(
                "postgresql+asyncpg",
                username=self.db_user,
                password=self.db_password or None,
                database=self.db_name,
                query={"host": self.db_host},
            )

        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def database_name(self) -> str | None:
        return self.sqlalchemy_url.database

    @property
    def sql_echo(self) -> bool:
        return self.environment == "development"

    @property
    def engine_connect_args(self) -> dict:
        """Driver arguments; TLS for remote PostgreSQL hosts in production."""
        url = self.sqlalchemy_url
        if not url.drivername.startswith("postgresql"):
            return {}
        if self.is_production and not self.uses_cloud_sql_socket:
            if (url.host or "") not in LOCAL_HOSTS:
                return {"ssl": "require"}
        return {}

    @property
    def cors_origins(self) -> list[str]:
        if self.is_production:
            return ["*"]
        return [self.frontend_url]


settings = Settings()
