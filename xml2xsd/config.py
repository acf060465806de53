"""Konfigurationsmanagement mit Pydantic Settings.

Lädt Konfiguration aus Environment-Variablen (Präfix XML2XSD_) und .env-Datei.
Alle Felder haben Defaults – das Tool läuft ohne jede Konfiguration.
Die Namespaces im generierten Schema sind Konstanten (siehe schema.emitter).
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Erlaubte Log-Level."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Settings(BaseSettings):
    """Zentrale Konfiguration von xml2xsd."""

    model_config = SettingsConfigDict(
        env_prefix="XML2XSD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Logging ---
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Log-Level für die Anwendung",
    )
    log_dir: Optional[Path] = Field(
        default=None,
        description="Verzeichnis für Log-Dateien (None = nur Konsole)",
    )

    # --- Ausgabe ---
    default_output_name: str = Field(
        default="generated_schema.xsd",
        description="Dateiname für --default-name",
    )

    @field_validator("default_output_name")
    @classmethod
    def validate_output_name(cls, v: str) -> str:
        """Dateiname muss auf .xsd enden und darf kein Verzeichnis enthalten."""
        v = v.strip()
        if not v.lower().endswith(".xsd"):
            raise ValueError(
                "XML2XSD_DEFAULT_OUTPUT_NAME muss auf '.xsd' enden."
            )
        if Path(v).name != v:
            raise ValueError(
                "XML2XSD_DEFAULT_OUTPUT_NAME darf nur ein Dateiname sein, kein Pfad."
            )
        return v


# Singleton-Pattern: wird beim ersten Zugriff erstellt
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Gibt die Settings-Instanz zurück (Lazy Singleton).

    Wird beim ersten Aufruf erstellt und danach wiederverwendet.
    Wirft ValidationError bei ungültigen Werten.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
