"""Provider configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Provider settings loaded from environment variables."""

    # API
    api_token: str = ""
    network: str = ""
    url: str = "netaccess.io"
    endpoint: str = ""

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "NETACCESS_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def graphql_server_url(self) -> str:
        """GraphQL endpoint, either explicit or derived from the network name."""
        if self.endpoint:
            return self.endpoint
        return f"https://{self.network}.{self.url}/api/graphql/"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
