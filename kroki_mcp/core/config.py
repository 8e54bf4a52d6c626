"""Application configuration"""
from pydantic_settings import BaseSettings
from typing import Optional


DEFAULT_KROKI_URL = "https://kroki.io"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Kroki rendering service
    KROKI_SERVER_URL: str = DEFAULT_KROKI_URL

    @property
    def KROKI_BASE_URL(self) -> str:
        """Base URL without trailing slash, falling back to the public service"""
        return (self.KROKI_SERVER_URL or DEFAULT_KROKI_URL).rstrip("/")

    # Application
    PROJECT_NAME: str = "Kroki MCP Server"
    VERSION: str = "1.0.0"
    API_V1_PREFIX: str = "/api/v1"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: Optional[str] = None
    LOG_FILE: Optional[str] = None

    # MCP server transport (stdio for local clients, sse/http for web clients)
    MCP_TRANSPORT: str = "stdio"
    MCP_HOST: str = "127.0.0.1"
    MCP_PORT: int = 8001

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env that aren't defined in Settings


def get_settings() -> Settings:
    """Read settings fresh from the environment"""
    return Settings()


# Global settings instance
settings = get_settings()
