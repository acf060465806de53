"""Einstiegspunkt der Konvertierung: XML-Text → XSD-Text.

Dünne Orchestrierung:
1. Tree-Parser aufrufen (austauschbar, Standard: lxml)
2. Kein Wurzelelement → NoRootElementError
3. Strukturanalyse → Records
4. Emitter → Schema-Text

Jeder Aufruf hat seine eigene Record-Map; es gibt keinen Zustand
zwischen Aufrufen.
"""

from __future__ import annotations

from xml2xsd.logging_config import get_logger
from xml2xsd.schema.analyzer import analyze
from xml2xsd.schema.emitter import emit
from xml2xsd.xml.exceptions import NoRootElementError, XmlParseError
from xml2xsd.xml.parser import TreeParser, parse_xml

logger = get_logger("converter")


def generate_schema(xml_text: str | bytes, parser: TreeParser = parse_xml) -> str:
    """Erzeugt ein Best-Effort-XSD aus einem einzelnen XML-Dokument.

    Args:
        xml_text: XML-Dokument als String oder Bytes (Kodierung erkennt der Parser).
        parser: Tree-Parser; in Tests durch eine Attrappe ersetzbar.

    Returns:
        Das generierte Schema als String.

    Raises:
        XmlParseError: Der Parser hat die Eingabe abgelehnt.
        NoRootElementError: Die Eingabe enthält kein Wurzelelement.
    """
    try:
        root = parser(xml_text)
    except XmlParseError as exc:
        logger.error("XML-Parserfehler: %s", exc.detail)
        raise

    if root is None:
        raise NoRootElementError()

    records = analyze(root)
    schema = emit(records)

    logger.info(
        "Schema generiert: Wurzel '%s', %d Tags, %d Zeichen",
        root.tag, len(records), len(schema),
    )
    return schema
