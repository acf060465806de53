"""Schema-Inferenz: Strukturanalyse und XSD-Ausgabe.

Zwei Module:
- analyzer: Durchläuft den Knotenbaum und baut ElementRecords auf
- emitter: Rendert die Records als XSD-Dokument
"""

from xml2xsd.schema.analyzer import analyze
from xml2xsd.schema.emitter import TARGET_NAMESPACE, XS_NAMESPACE, emit, type_name
from xml2xsd.schema.records import ElementRecord, RecordMap

__all__ = [
    "ElementRecord",
    "RecordMap",
    "TARGET_NAMESPACE",
    "XS_NAMESPACE",
    "analyze",
    "emit",
    "type_name",
]
