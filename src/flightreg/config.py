"""Configuración de flightreg, cargada de variables de entorno y .env."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parámetros del registro (prefijo FLIGHTREG_)."""

    model_config = SettingsConfigDict(
        env_prefix="FLIGHTREG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    min_age: int = Field(default=15, ge=0, description="Edad mínima del pasajero")
    max_age: int = Field(default=120, gt=0, description="Edad máxima del pasajero")
    clear_screen: bool = True
    theme: str = "default"
    log_level: str = "WARNING"

    @model_validator(mode="after")
    def check_age_range(self) -> "Settings":
        if self.max_age <= self.min_age:
            raise ValueError("max_age debe ser mayor que min_age")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
