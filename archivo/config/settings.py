# archivo/config/settings.py
from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    # App Info
    app_name: str = "Archivo API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Base de datos - SQLite local, PostgreSQL en producción
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./archivo.db")

    # Prefijo bajo el que se montan todos los módulos
    api_prefix: str = ""

    # CORS (lista separada por comas)
    cors_origins: str = "*"

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 10000))

    @property
    def database_url_with_ssl(self) -> str:
        """Driver psycopg 3 y SSL para conexiones PostgreSQL hospedadas"""
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+psycopg://", 1)
        if url.startswith("postgresql") and "localhost" not in url and "sslmode=" not in url:
            separator = "&" if "?" in url else "?"
            return f"{url}{separator}sslmode=require"
        return url

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
