"""Конфигурация приложения через pydantic-settings.

Значения читаются из переменных окружения с префиксом `FRAMER_` и из
необязательного файла `.env`; лишние ключи игнорируются.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from framer.models.frame_settings import DEFAULT_FONT


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FRAMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    library_dir: Path = Field(default=Path("./framed"), description="Папка, куда сохраняются готовые фото")
    fonts_dir: Path = Field(default=Path("./fonts"), description="Папка с файлами шрифтов .ttf/.ttc/.otf")
    default_font: str = Field(default=DEFAULT_FONT, description="Шрифт подписи по умолчанию")
    jpeg_quality: int = Field(default=95, ge=1, le=100)
    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return AppConfig()
