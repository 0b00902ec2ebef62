"""Global application settings."""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration with environment variable support."""

    # Service Info
    APP_NAME: str = "Prompt System Pro"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ORIGINS: List[str] = ["*"]
    MAX_REQUEST_BYTES: int = 10 * 1024 * 1024  # 10MB request body ceiling

    # Storage
    PROMPTS_DIR: str = "prompts"
    PROMPT_FILE_EXTENSION: str = ".md"
    PUBLIC_DIR: Optional[str] = "public"  # Built browser client, served when present

    # Completion provider (Groq, OpenAI-compatible API)
    GROQ_API_KEY: str = ""
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    COMPLETION_TIMEOUT_SECONDS: float = 60.0

    # Generation defaults
    DEFAULT_MODEL: str = "llama-3.3-70b-versatile"
    DEFAULT_TEMPERATURE: float = 0.7
    DEFAULT_MAX_TOKENS: int = 4096
    DEFAULT_SYSTEM_PROMPT: str = "Você é um assistente de programação especialista."

    # Logging
    LOG_LEVEL: str = "INFO"
    LOGGING_HOST: str = ""  # Empty disables the socket handler
    LOGGING_PORT: int = 9999
    NOISY_LOGGERS: str = "httpx,httpcore,asyncio,uvicorn.access"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
