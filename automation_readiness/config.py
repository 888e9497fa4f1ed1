from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ROOT_DIR / ".env"),
        env_file_encoding="utf-8",
        env_prefix="READINESS_",
        extra="ignore",
    )

    # App
    app_name: str = "automation-readiness"
    app_env: str = "dev"
    log_level: str = "INFO"

    # Blocker ranking
    blocker_gap_threshold: float = 15.0
    max_blockers: int = 4

    # Local input store
    storage_dir: Path = Path.home() / ".automation_readiness"
    storage_key: str = "automationReadinessInputs"

    # Export
    csv_filename: str = "automation-readiness-score.csv"
    share_base_url: str = "http://localhost:8000/"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
