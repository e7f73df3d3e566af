"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here - no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix every router is mounted under.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for LLM-backed endpoints.
        rate_limit_enabled: Master switch for rate limiting.
        session_secret: Key used to sign the session cookie.
        session_max_age_seconds: Session cookie lifetime.
        session_https_only: Mark the session cookie Secure.
        bcrypt_rounds: Work factor for password hashing.
        xp_per_level: Experience points needed per level.

    Database settings follow the same pattern as the brokerage and LLM
    settings: an explicit URL wins, otherwise one is built from parts.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "MarketMentor"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"
    rate_limit_enabled: bool = True

    session_secret: str = "marketmentor-dev-secret"
    session_max_age_seconds: int = 24 * 60 * 60
    session_https_only: bool = False

    bcrypt_rounds: int = 12
    xp_per_level: int = 1000

    # Postgres settings
    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "marketmentor"

    # Brokerage (Alpaca paper trading)
    alpaca_api_key: str = ""
    alpaca_secret_key: str = ""
    alpaca_base_url: str = "https://paper-api.alpaca.markets"
    alpaca_data_url: str = "https://data.alpaca.markets"
    alpaca_data_feed: str = "iex"
    alpaca_timeout_seconds: float = 10.0

    # LLM (OpenAI-compatible chat completions)
    openai_api_key: str = ""
    llm_base_url: str = "https://api.openai.com/v1"
    llm_model: str = "gpt-4o"
    lesson_model: str = "gpt-4-turbo-preview"
    llm_temperature: float = 0.7
    llm_timeout_seconds: float = 30.0

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a Postgres URL from postgres_* values (Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
