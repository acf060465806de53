"""XML-Eingabe: Knotenmodell, Tree-Parser und Fehler.

Öffentliche API:
    parse_xml   – lxml-basierter Tree-Parser
    TreeParser  – Protokoll für austauschbare Parser (z.B. in Tests)
    XmlElement, XmlText – Knotenmodell

Exceptions:
    InvalidXmlError, XmlParseError, NoRootElementError
"""

from xml2xsd.xml.exceptions import (
    InvalidXmlError,
    NoRootElementError,
    XmlParseError,
)
from xml2xsd.xml.models import XmlElement, XmlNode, XmlText
from xml2xsd.xml.parser import TreeParser, parse_xml

__all__ = [
    # Parser
    "TreeParser",
    "parse_xml",
    # Modelle
    "XmlElement",
    "XmlNode",
    "XmlText",
    # Exceptions
    "InvalidXmlError",
    "NoRootElementError",
    "XmlParseError",
]
