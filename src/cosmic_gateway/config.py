"""Application configuration using pydantic-settings.

Holds the Cavos service credentials and the Starknet network used when a
request does not name one.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when required configuration is missing."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Server
    # ======================
    host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=3000, description="API server port")

    # ======================
    # Environment
    # ======================
    node_env: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # ======================
    # Cavos
    # ======================
    cavos_api_secret: str = Field(default="", description="Cavos organization API secret")
    cavos_hash_secret: str = Field(default="", description="Cavos secret for hashed private keys")
    default_network: str = Field(default="sepolia", description="Starknet network used by default")
    cavos_base_url: str = Field(
        default="https://services.cavos.xyz/api/v1/external",
        description="Cavos external API base URL",
    )
    cavos_timeout: float = Field(default=30.0, description="Upstream request timeout in seconds")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.node_env.lower() == "production"

    def missing_secrets(self) -> list[str]:
        """Names of required environment variables that are not set."""
        required = {
            "CAVOS_API_SECRET": self.cavos_api_secret,
            "CAVOS_HASH_SECRET": self.cavos_hash_secret,
        }
        return [name for name, value in required.items() if not value]

    def validate_required(self) -> None:
        """Fail fast when the Cavos credentials are absent."""
        missing = self.missing_secrets()
        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.node_env,
            "debug": self.debug,
            "host": self.host,
            "port": self.port,
            "cavos": {
                "base_url": self.cavos_base_url,
                "timeout": self.cavos_timeout,
                "default_network": self.default_network,
                "api_secret": "***" if self.cavos_api_secret else "(not set)",
                "hash_secret": "***" if self.cavos_hash_secret else "(not set)",
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
