"""Kommandozeilen-Einstiegspunkt von xml2xsd.

Aufruf:
  xml2xsd beispiel.xml                 # Schema nach stdout
  xml2xsd beispiel.xml -o schema.xsd   # Schema in Datei
  xml2xsd beispiel.xml --default-name  # → ./generated_schema.xsd
  cat beispiel.xml | xml2xsd -         # XML von stdin

Exit-Codes:
  0 – Schema erzeugt
  1 – XML ungültig (Syntaxfehler, kein Wurzelelement)
  2 – Aufruf- oder Dateifehler (leere Eingabe, Datei nicht lesbar/schreibbar)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from xml2xsd.config import get_settings
from xml2xsd.converter import generate_schema
from xml2xsd.logging_config import get_logger, setup_logging
from xml2xsd.xml.exceptions import InvalidXmlError

logger = get_logger("cli")

STDIO = "-"

EXIT_OK = 0
EXIT_INVALID_XML = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xml2xsd",
        description="Erzeugt ein Best-Effort-XSD aus einem XML-Dokument.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIO,
        help="Pfad zur XML-Datei oder '-' für stdin (Default)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-o", "--output",
        default=STDIO,
        help="Zieldatei für das Schema oder '-' für stdout (Default)",
    )
    output.add_argument(
        "--default-name",
        action="store_true",
        help="Schema unter dem konfigurierten Standardnamen im aktuellen Verzeichnis ablegen",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log-Level (überschreibt XML2XSD_LOG_LEVEL)",
    )
    return parser


def _read_input(source: str) -> bytes:
    """Liest die Eingabe als Bytes – die Kodierung bestimmt lxml (BOM, Deklaration)."""
    if source == STDIO:
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _write_output(target: str, schema: str) -> None:
    if target == STDIO:
        sys.stdout.write(schema)
        return
    Path(target).write_text(schema, encoding="utf-8")
    logger.info("Schema gespeichert: %s", target)


def main(argv: list[str] | None = None) -> int:
    """Führt eine Konvertierung aus und gibt den Exit-Code zurück."""
    args = build_arg_parser().parse_args(argv)
    settings = get_settings()

    log_level = args.log_level or settings.log_level.value
    setup_logging(log_level, settings.log_dir)

    target = settings.default_output_name if args.default_name else args.output

    try:
        xml_data = _read_input(args.input)
    except OSError as exc:
        print(f"Fehler beim Lesen der Datei: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if not xml_data.strip():
        print("Bitte XML-Inhalt angeben.", file=sys.stderr)
        return EXIT_USAGE

    try:
        schema = generate_schema(xml_data)
    except InvalidXmlError as exc:
        logger.error("Konvertierung fehlgeschlagen: %s", exc)
        print(f"Konvertierung fehlgeschlagen: {exc}", file=sys.stderr)
        return EXIT_INVALID_XML

    try:
        _write_output(target, schema)
    except OSError as exc:
        print(f"Fehler beim Schreiben der Datei: {exc}", file=sys.stderr)
        return EXIT_USAGE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
