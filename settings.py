# Di dalam file: settings.py

from typing import Any, List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Path JSON tabel aturan madzhab; kosong → tabel Syafi'i bawaan
    faraidh_config_path: Optional[str] = None
    log_level: str = "INFO"
    # Any agar env tidak dipaksa berformat JSON (boleh "a,b")
    cors_origins: Any = ["http://localhost", "http://localhost:3000"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return list(value or [])

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        return str(value or "INFO").strip().upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
