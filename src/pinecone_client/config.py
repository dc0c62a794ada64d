"""Client configuration and settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from pinecone_client.core.constants import (
    CONTROLLER_URL_TEMPLATE,
    GRPC_PORT,
    INDEX_HOST_TEMPLATE,
)
from pinecone_client.core.exceptions import InvalidParamsError


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    The instance is frozen: build it once and share it across every service
    created from it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "pinecone-client"
    app_version: str = "0.1.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # Pinecone Configuration
    pinecone_api_key: str | None = None
    pinecone_environment: str | None = None
    pinecone_project_name: str | None = None
    pinecone_index_name: str | None = None
    pinecone_prefer_grpc: bool = False
    pinecone_timeout: float = 30.0  # Default per-request timeout in seconds

    @property
    def user_agent(self) -> str:
        return f"{self.app_name}/{self.app_version}"

    @property
    def controller_url(self) -> str:
        """Base URL of the control plane for the configured environment."""
        return CONTROLLER_URL_TEMPLATE.format(environment=self._require_environment())

    def index_host(self, index_name: str) -> str:
        """Return the data-plane host name serving ``index_name``."""
        if not index_name:
            raise InvalidParamsError("index name is required")
        if not self.pinecone_project_name:
            raise InvalidParamsError("project name is required")
        return INDEX_HOST_TEMPLATE.format(
            index_name=index_name,
            project_name=self.pinecone_project_name,
            environment=self._require_environment(),
        )

    def index_url(self, index_name: str) -> str:
        return f"https://{self.index_host(index_name)}"

    def index_grpc_target(self, index_name: str) -> str:
        return f"{self.index_host(index_name)}:{GRPC_PORT}"

    def _require_environment(self) -> str:
        if not self.pinecone_environment:
            raise InvalidParamsError("environment is required")
        return self.pinecone_environment


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Client settings instance.
    """
    return Settings()
