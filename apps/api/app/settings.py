from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=(".env", "apps/api/.env"),
        env_file_encoding="utf-8",
    )

    oracle_api_key: str | None = None
    oracle_base_url: str = "https://ai.gateway.lovable.dev/v1"
    oracle_model: str = "google/gemini-2.5-pro"
    oracle_timeout_seconds: float = 60.0
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
    ]
    log_level: str = "INFO"


settings = Settings()
