import json

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = Field(default="local", alias="ENV")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    cors_origins: str = Field(default="http://localhost:5173", alias="CORS_ORIGINS")

    # ─────────────────────────────────────────────
    # TMDB
    # ─────────────────────────────────────────────
    # Missing key is reported at search time, not at startup.
    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", alias="TMDB_BASE_URL")
    tmdb_language: str = Field(default="it-IT", alias="TMDB_LANGUAGE")
    tmdb_timeout_seconds: float = Field(default=10.0, gt=0, alias="TMDB_TIMEOUT_SECONDS")

    # ─────────────────────────────────────────────
    # Presentation
    # ─────────────────────────────────────────────
    display_locale: str = Field(default="it", alias="DISPLAY_LOCALE")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p/", alias="TMDB_IMAGE_BASE_URL")
    tmdb_image_size: str = Field(default="w342", alias="TMDB_IMAGE_SIZE")

    @field_validator("tmdb_api_key", mode="before")
    @classmethod
    def normalize_tmdb_api_key(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        cleaned = value.strip()
        return cleaned or None

    @field_validator("tmdb_base_url", mode="before")
    @classmethod
    def normalize_tmdb_base_url(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.strip().rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.strip().upper() or "WARNING"

    def cors_origin_list(self) -> list[str]:
        raw = (self.cors_origins or "").strip()
        if not raw:
            return []

        values: list[str]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                values = [str(v) for v in parsed if isinstance(v, str)]
            else:
                values = [raw]
        else:
            values = raw.split(",")

        normalized: list[str] = []
        seen: set[str] = set()
        for value in values:
            cleaned = value.strip().strip("\"'")
            if not cleaned:
                continue
            # CORS origins are scheme + host (+ optional port) with no path slash.
            if cleaned != "*" and cleaned.endswith("/"):
                cleaned = cleaned.rstrip("/")
            if cleaned in seen:
                continue
            seen.add(cleaned)
            normalized.append(cleaned)

        return normalized

settings = Settings()
