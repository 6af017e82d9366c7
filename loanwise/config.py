"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./loanwise.db"

    # LLM gateway (OpenAI-compatible chat completions)
    llm_gateway_url: str = "http://localhost:8003"
    llm_api_key: str = ""
    llm_model: str = "google/gemini-3-flash-preview"

    # Service
    service_name: str = "loanwise"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 30.0
    llm_max_retries: int = 3
    llm_backoff_base: float = 1.0  # Exponential backoff base in seconds


settings = Settings()
