# byteme/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FFProbeConfig(BaseModel):
    bin: str = Field(default="ffprobe", alias="FFPROBE_BIN")
    timeout_sec: int = Field(30, ge=1)
    log_level: str = "error"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace
    # -show_entries selector for frame-dump mode; "frame=pkt_size" also works but decodes
    frame_size_entry: str = "packet=size"

    model_config = {"populate_by_name": True}


class ConcurrencyConfig(BaseModel):
    probe_workers: int = Field(4, ge=1)
    thread_queue_maxsize: int = 64


class ClassifierConfig(BaseModel):
    sniff_bytes: int = Field(512, ge=0)


class DisplayConfig(BaseModel):
    filename_limit: int = Field(24, ge=0)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "byteme"
    app_env: str = "development"  # development|test|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    ffprobe: FFProbeConfig = FFProbeConfig()
    concurrency: ConcurrencyConfig = ConcurrencyConfig()
    classifier: ClassifierConfig = ClassifierConfig()
    naming: DisplayConfig = DisplayConfig()  # not "display": X11 exports DISPLAY

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return str(v or "INFO").strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from byteme.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings reads env vars and .env automatically
