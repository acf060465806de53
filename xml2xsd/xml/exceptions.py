"""Spezifische Exceptions für die XML-Eingabe.

Hierarchie:
    InvalidXmlError (Basis)
    ├── XmlParseError         – Parser hat die Eingabe abgelehnt (Syntaxfehler)
    └── NoRootElementError    – Kein Wurzelelement (leer, nur Kommentare)
"""

from __future__ import annotations


class InvalidXmlError(ValueError):
    """Basisklasse für alle Fehler einer ungültigen XML-Eingabe."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Ungültiges XML: {detail}")


class XmlParseError(InvalidXmlError):
    """Der Parser hat die Eingabe abgelehnt.

    `detail` enthält die Diagnose des Parsers, Zeile/Spalte sofern bekannt.
    """

    def __init__(
        self,
        detail: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(detail)


class NoRootElementError(InvalidXmlError):
    """Parsen war erfolgreich, aber es gibt kein Wurzelelement."""

    def __init__(self) -> None:
        super().__init__("Kein Wurzelelement gefunden.")
