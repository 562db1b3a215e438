"""
core/settings.py
Настройки Fisher-Yates сервиса.
Читает FY_* переменные (или .env): окружение, уровень логов, источник случайности.
"""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # читаем .env, игнорируем лишние ключи, префикс FY_, регистр не важен
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_prefix="FY_",
        case_sensitive=False,
    )

    environment: Literal["development", "production"] = Field(
        "production", description="development → включены /docs и /redoc"
    )
    log_level: str = Field("INFO", description="Уровень логирования (имя уровня logging)")
    random_source: Literal["pseudo", "system"] = Field(
        "pseudo", description="pseudo → random.Random, system → random.SystemRandom"
    )
    https_redirect: bool = Field(False, description="Редирект http → https")

settings = Settings()
