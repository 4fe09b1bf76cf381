from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_upload_bytes: int = 10 * 1024 * 1024
    supported_media_type: str = "application/pdf"

    pdf_engine: str = "pdfplumber"

    llm_provider: str = "anthropic"
    llm_api_url: str = "https://api.anthropic.com/v1/messages"
    llm_api_version: str = "2023-06-01"
    llm_api_key: str = ""
    llm_timeout_seconds: int = 60
    openai_base_url: str | None = None

    analysis_model: str = "claude-sonnet-4-20250514"
    drafting_model: str = "claude-opus-4-20250514"
    analysis_max_tokens: int = 3000
    drafting_max_tokens: int = 4000
    llm_temperature: float = 0.3
    llm_top_p: float = 0.9

    quality_min_words: int = 100
    quality_min_keywords: int = 3
    quality_max_noise_ratio: float = 0.3
    quality_high_min_words: int = 500
    quality_medium_min_words: int = 200

    draft_source_text_limit: int = 2000
