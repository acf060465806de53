"""Logging-Konfiguration für xml2xsd.

Setzt strukturiertes Logging auf mit:
- Console-Handler (stderr; stdout bleibt für das Schema frei)
- RotatingFileHandler für persistente Logs (optional)
- Logger-Hierarchie: xml2xsd.{component}
  → cli, converter

Module, die `logging.getLogger(__name__)` verwenden, landen automatisch
unter demselben Basis-Logger, weil das Paket ebenfalls `xml2xsd` heißt.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


# Basis-Logger-Name – alle Sublogger erben davon
ROOT_LOGGER_NAME = "xml2xsd"

# Verfügbare Komponenten-Logger
COMPONENTS = ("cli", "converter")

# Log-Format: Zeitstempel | Level | Komponente | Nachricht
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation: 5 MB pro Datei, maximal 3 Dateien behalten
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> None:
    """Konfiguriert das Logging-System.

    Args:
        log_level: Log-Level als String (DEBUG, INFO, WARNING, ERROR)
        log_dir: Verzeichnis für Log-Dateien. None = nur stderr.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Vorhandene Handler entfernen (bei erneutem Aufruf, z.B. in Tests)
    root_logger.handlers.clear()

    # stdout ist für das Schema reserviert, wenn kein -o angegeben ist
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / "xml2xsd.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning("Log-Verzeichnis nicht beschreibbar: %s – nur Konsole aktiv", e)


def get_logger(component: str) -> logging.Logger:
    """Gibt einen Logger für die angegebene Komponente zurück.

    Args:
        component: Name der Komponente (siehe COMPONENTS)

    Returns:
        Logger-Instanz mit Name 'xml2xsd.{component}'

    Raises:
        ValueError: Bei einer unbekannten Komponente.
    """
    if component not in COMPONENTS:
        raise ValueError(f"Unbekannte Log-Komponente: {component!r}")
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
