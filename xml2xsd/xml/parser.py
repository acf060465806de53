"""Tree-Parser: XML-Text → Knotenbaum (XmlElement/XmlText).

Der Parser ist ein austauschbarer Baustein (`TreeParser`-Protokoll).
Die Standard-Implementierung `parse_xml` nutzt lxml und liefert:

- das Wurzelelement als `XmlElement`
- `None`, wenn das Dokument nur aus Prolog-Markup besteht
  (leer, Whitespace, XML-Deklaration, Kommentare, PIs, DOCTYPE)
- `XmlParseError` bei Syntaxfehlern, mit der Diagnose von libxml2

Namespaces werden nicht aufgelöst: Tag- und Attributnamen behalten
ihr Präfix aus dem Quelldokument (`prefix:local`).
"""

from __future__ import annotations

import codecs
import logging
import re
from typing import Protocol

from lxml import etree

from xml2xsd.xml.exceptions import XmlParseError
from xml2xsd.xml.models import XmlElement, XmlNode, XmlText

logger = logging.getLogger(__name__)

# xml:lang, xml:space etc. stehen nie in der nsmap
_XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# XML-Deklaration/PIs, Kommentare, DOCTYPE (mit internem Subset)
_PROLOG_MARKUP = re.compile(
    r"<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^\[>]*(?:\[.*?\])?\s*>",
    re.DOTALL,
)


class TreeParser(Protocol):
    """Fähigkeit „XML-Text parsen“.

    Gibt das Wurzelelement zurück oder None, wenn es keins gibt.
    Wirft XmlParseError, wenn die Eingabe syntaktisch ungültig ist.
    """

    def __call__(self, xml_text: str | bytes) -> XmlElement | None: ...


def _make_parser(encoding: str | None = None) -> etree.XMLParser:
    """Erzeugt einen lxml-Parser ohne Netzwerkzugriffe.

    Interne Entities (<!ENTITY e "...">) werden aufgelöst, externe nicht
    (lxml-Default "internal").
    encoding überschreibt eine abweichende encoding-Deklaration im Prolog;
    bei None erkennt lxml die Kodierung selbst (BOM, Deklaration).
    """
    return etree.XMLParser(
        encoding=encoding,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def parse_xml(xml_text: str | bytes) -> XmlElement | None:
    """Parst XML mit lxml und baut den Knotenbaum auf.

    Args:
        xml_text: Vollständiges XML-Dokument. Als str wird es immer als
            UTF-8 an lxml gegeben; als bytes (z.B. Dateiinhalt) bestimmt
            lxml die Kodierung aus BOM bzw. encoding-Deklaration.

    Returns:
        Wurzelelement, oder None wenn kein Wurzelelement vorhanden ist.

    Raises:
        XmlParseError: Wenn lxml die Eingabe ablehnt.
    """
    if not xml_text or not xml_text.strip():
        return None

    if isinstance(xml_text, str):
        data, parser = xml_text.encode("utf-8"), _make_parser("utf-8")
    else:
        data, parser = xml_text, _make_parser()

    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        # libxml2 meldet ERR_DOCUMENT_EMPTY auch für reinen Text ("hello");
        # kein Wurzelelement nur dann, wenn außer Prolog-Markup nichts da ist
        if (
            exc.code == etree.ErrorTypes.ERR_DOCUMENT_EMPTY
            and _only_prolog_markup(xml_text)
        ):
            logger.debug("Kein Wurzelelement gefunden: %s", exc)
            return None
        line, column = exc.position
        raise XmlParseError(str(exc), line=line, column=column) from exc

    if root is None:
        return None
    return _convert(root)


def _only_prolog_markup(xml_text: str | bytes) -> bool:
    """True wenn die Eingabe nur XML-Deklaration, Kommentare, PIs,
    DOCTYPE und Whitespace enthält."""
    text = xml_text if isinstance(xml_text, str) else _decode_for_scan(xml_text)
    return not _PROLOG_MARKUP.sub("", text).strip()


def _decode_for_scan(data: bytes) -> str:
    """Grobe Dekodierung, nur um Markup von Zeichendaten zu unterscheiden."""
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return data.decode("utf-16", errors="replace")
    if data.startswith(codecs.BOM_UTF8):
        return data.decode("utf-8-sig", errors="replace")
    # Markup ist in allen ASCII-kompatiblen Kodierungen gleich
    return data.decode("latin-1")


def _convert(element: etree._Element) -> XmlElement:
    """Wandelt ein lxml-Element rekursiv in das Knotenmodell um.

    lxml hängt Text an `.text` (vor dem ersten Kind) und `.tail`
    (nach einem Kind) – beides wird hier zu eigenen XmlText-Knoten
    in Dokumentreihenfolge.
    """
    children: list[XmlNode] = []
    if element.text:
        children.append(XmlText(value=element.text))

    for child in element:
        # Externe Entity-Referenzen: tag ist keine Zeichenkette, Tail trotzdem behalten
        if isinstance(child.tag, str):
            children.append(_convert(child))
        if child.tail:
            children.append(XmlText(value=child.tail))

    attributes = [
        (_attribute_name(element, name), value)
        for name, value in element.attrib.items()
    ]

    return XmlElement(
        tag=_element_name(element),
        attributes=attributes,
        children=children,
    )


def _element_name(element: etree._Element) -> str:
    """Tag-Name mit Präfix aus dem Quelldokument (ohne Namespace-URI)."""
    localname = etree.QName(element).localname
    if element.prefix:
        return f"{element.prefix}:{localname}"
    return localname


def _attribute_name(element: etree._Element, name: str) -> str:
    """Attributname mit Präfix; Clark-Notation wird zurückübersetzt."""
    qname = etree.QName(name)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == _XML_NAMESPACE:
        return f"xml:{qname.localname}"

    for prefix, uri in element.nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname
