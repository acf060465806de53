"""xml2xsd – Best-Effort-XSD aus einem einzelnen XML-Dokument.

Öffentliche API:
    generate_schema  – XML-Text → XSD-Text
    analyze / emit   – Strukturanalyse und Schema-Ausgabe einzeln

Exceptions:
    InvalidXmlError, XmlParseError, NoRootElementError

Typische Verwendung:
    from xml2xsd import generate_schema

    xsd = generate_schema("<root><item>Data</item></root>")
"""

from xml2xsd.converter import generate_schema
from xml2xsd.schema import ElementRecord, analyze, emit
from xml2xsd.xml import (
    InvalidXmlError,
    NoRootElementError,
    XmlElement,
    XmlParseError,
    XmlText,
    parse_xml,
)

__version__ = "0.1.0"

__all__ = [
    "generate_schema",
    "analyze",
    "emit",
    "parse_xml",
    "ElementRecord",
    "XmlElement",
    "XmlText",
    "InvalidXmlError",
    "NoRootElementError",
    "XmlParseError",
]
