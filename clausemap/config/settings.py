from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "http"
    analysis_base_url: str = "http://localhost:8000"
    analysis_timeout_seconds: int = 120

    cache_backend: str = "memory"
    cache_key_prefix: str = "doc_cache_"
    cache_current_doc_key: str = "current_doc_id"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "clausemap"
    db_username: str = "clausemap"
    db_password: str = "secret"
    db_cache_table: str = "document_cache"

    progress_tick_seconds: float = 0.5
    progress_tick_step: int = 5
    progress_ceiling: int = 90
    handoff_delay_seconds: float = 2.0
