from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DOMAIN_LISTS_PATH = (
    Path(__file__).resolve().parent.parent / "classification" / "data" / "domains.json"
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    search_provider: str = "google_vision"
    vision_api_key: str = ""
    vision_endpoint: str = "https://vision.googleapis.com/v1/images:annotate"
    vision_max_results: int = 100
    vision_timeout_seconds: int = 30
    related_pages_threshold: int = 5
    filter_text_search_pages: bool = True

    judgment_provider: str = "gemini"
    judgment_api_key: str = ""
    judgment_model_name: str = "gemini-2.0-flash"
    judgment_base_url: str = ""
    judgment_timeout_seconds: int = 30
    judgment_temperature: float = 0.0
    compare_images_enabled: bool = True

    no_match_judgment: Literal["○", "△", "×", "?"] = "?"
    error_judgment: Literal["○", "△", "×", "?"] = "?"
    max_concurrent_judgments: int | None = None

    pdf_engine: str = "pymupdf"
    pdf_render_scale: float = 2.0
    max_upload_bytes: int = 20 * 1024 * 1024

    domain_lists_path: Path = DEFAULT_DOMAIN_LISTS_PATH
