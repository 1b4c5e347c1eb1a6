"""
config.py - Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks FORMCHECK_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # /validate: limit liczby atrybutów w jednym żądaniu
    max_attributes: int = 500

    # App
    app_title: str = "FormCheck"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="FORMCHECK_", env_file=".env", extra="ignore")
