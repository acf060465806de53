"""Schema-Emitter: Records → XSD-Text.

Zwei Durchläufe über die Records (jeweils in Reihenfolge des ersten
Auftretens):
1. Globale Element-Deklarationen – xs:string oder tns:<tag>Type
2. complexType-Definitionen für alle Tags, die Struktur brauchen

Entscheidungstabelle pro Tag (in dieser Priorität):

    Text  Attribute  Kinder   Ausgabe
    ja    nein       nein     xs:string, kein Typ
    ja    ja         nein     simpleContent/extension + Attribute
    egal  egal       ja       sequence mit Kind-Referenzen (mixed bei Text) + Attribute
    nein  egal       nein     leere optionale sequence + Attribute

Alle Attribute sind xs:string und optional, alle Kind-Referenzen
minOccurs="0" maxOccurs="unbounded" – es wird nichts weiter geschlossen.
"""

from __future__ import annotations

import logging

from xml2xsd.schema.records import ElementRecord, RecordMap

logger = logging.getLogger(__name__)

XS_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
# Platzhalter – wird nicht aus dem Quelldokument abgeleitet
TARGET_NAMESPACE = "http://example.com/generatedSchema"
TYPE_SUFFIX = "Type"

_PREAMBLE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    f'<xs:schema xmlns:xs="{XS_NAMESPACE}"\n'
    f'           targetNamespace="{TARGET_NAMESPACE}"\n'
    f'           xmlns:tns="{TARGET_NAMESPACE}"\n'
    '           elementFormDefault="qualified">\n'
    "\n"
)
_CLOSING = "</xs:schema>\n"


def type_name(tag: str) -> str:
    """Name des generierten Typs für einen Tag."""
    return f"{tag}{TYPE_SUFFIX}"


def needs_type(record: ElementRecord) -> bool:
    """True wenn der Tag eine eigene complexType-Definition bekommt."""
    return not record.is_simple_text


def emit(records: RecordMap) -> str:
    """Erzeugt das XSD-Dokument aus den Records.

    Schlägt nie fehl; auch ein leeres Mapping ergibt ein wohlgeformtes
    Schema (nur Präambel und Abschluss).
    """
    lines: list[str] = []

    lines.append("  <!-- Global Element Declarations -->")
    for tag, record in records.items():
        lines.append(_element_declaration(tag, record))
    lines.append("")

    lines.append("  <!-- Complex Type Definitions -->")
    type_count = 0
    for tag, record in records.items():
        if not needs_type(record):
            continue
        lines.extend(_complex_type(tag, record))
        lines.append("")
        type_count += 1

    logger.debug(
        "Schema erzeugt: %d Elemente, %d complexTypes", len(records), type_count,
    )
    return _PREAMBLE + "\n".join(lines) + "\n" + _CLOSING


def _element_declaration(tag: str, record: ElementRecord) -> str:
    if record.is_simple_text:
        return f'  <xs:element name="{tag}" type="xs:string"/>'
    return f'  <xs:element name="{tag}" type="tns:{type_name(tag)}"/>'


def _attribute(name: str, indent: str) -> str:
    return f'{indent}<xs:attribute name="{name}" type="xs:string" use="optional"/>'


def _complex_type(tag: str, record: ElementRecord) -> list[str]:
    """Rendert eine complexType-Definition gemäß Entscheidungstabelle."""
    # Text + Attribute ohne Kinder: Attribute stehen in der Extension
    if record.has_text and not record.has_children:
        lines = [
            f'  <xs:complexType name="{type_name(tag)}">',
            "    <xs:simpleContent>",
            '      <xs:extension base="xs:string">',
        ]
        lines.extend(_attribute(name, "        ") for name in record.attribute_names)
        lines.extend([
            "      </xs:extension>",
            "    </xs:simpleContent>",
            "  </xs:complexType>",
        ])
        return lines

    mixed = ' mixed="true"' if record.has_text else ""
    lines = [f'  <xs:complexType name="{type_name(tag)}"{mixed}>']

    if record.has_children:
        lines.append("    <xs:sequence>")
        lines.extend(
            f'      <xs:element ref="tns:{child}" minOccurs="0" maxOccurs="unbounded"/>'
            for child in record.ordered_children()
        )
        lines.append("    </xs:sequence>")
    else:
        # Leer oder nur Attribute
        lines.append('    <xs:sequence minOccurs="0"/>')

    lines.extend(_attribute(name, "    ") for name in record.attribute_names)
    lines.append("  </xs:complexType>")
    return lines
