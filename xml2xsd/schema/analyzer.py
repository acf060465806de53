"""Strukturanalyse: Ein Durchlauf über den Knotenbaum.

Sammelt pro Tag-Name:
- alle beobachteten Attributnamen
- alle direkten Kind-Tags (dedupliziert)
- ob direkt im Element nicht-leerer Text steht
- die Reihenfolge der Kinder (erste Instanz, später neue hinten angehängt)

Die Reihenfolge über mehrere Instanzen ist nur „best effort“: weicht die
Kind-Reihenfolge späterer Instanzen ab, gewinnt die erste Instanz.
"""

from __future__ import annotations

import logging

from xml2xsd.schema.records import ElementRecord, RecordMap
from xml2xsd.xml.models import XmlElement, XmlText

logger = logging.getLogger(__name__)


def analyze(root: XmlElement) -> RecordMap:
    """Analysiert den Baum ab `root` und liefert die Records.

    Args:
        root: Wurzelelement (bereits vom Aufrufer auf Existenz geprüft).

    Returns:
        Tag-Name → ElementRecord, in Reihenfolge des ersten Auftretens.
    """
    records: RecordMap = {}
    _visit(root, records, parent=None)

    logger.debug(
        "Strukturanalyse abgeschlossen: %d Tags (%s)",
        len(records), ", ".join(records),
    )
    return records


def _visit(element: XmlElement, records: RecordMap, parent: str | None) -> None:
    """Besucht ein Element und steigt rekursiv in seine Kindelemente ab.

    `parent` dient nur der Diagnose und landet nicht im Record.
    """
    record = records.get(element.tag)
    if record is None:
        record = ElementRecord(tag=element.tag)
        records[element.tag] = record
        logger.debug("Neuer Tag '%s' (Eltern: %s)", element.tag, parent or "-")

    for name in element.attribute_names:
        record.add_attribute(name)

    for child in element.children:
        if isinstance(child, XmlElement):
            record.add_child(child.tag)
            _visit(child, records, parent=element.tag)
        elif isinstance(child, XmlText) and not child.is_blank:
            record.has_text = True
