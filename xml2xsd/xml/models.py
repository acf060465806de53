"""Pydantic-Modelle für den geparsten XML-Baum.

Bilden nur das ab, was die Strukturanalyse braucht: Tag-Name, Attribute
(in Dokumentreihenfolge) und Kindknoten (Elemente und Text).
Kommentare und Processing Instructions tauchen im Modell nicht auf –
der Parser verwirft sie beim Aufbau.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class XmlText(BaseModel):
    """Textknoten direkt innerhalb eines Elements."""
    model_config = ConfigDict(frozen=True)

    value: str

    @property
    def is_blank(self) -> bool:
        """True wenn der Text nach strip() leer ist (Einrückung, Zeilenumbrüche)."""
        return not self.value.strip()


class XmlElement(BaseModel):
    """Elementknoten mit Attributen und Kindknoten."""
    model_config = ConfigDict(frozen=True)

    tag: str
    # (Name, Wert)-Paare in Dokumentreihenfolge
    attributes: list[tuple[str, str]] = Field(default_factory=list)
    children: list[Union[XmlElement, XmlText]] = Field(default_factory=list)

    @property
    def attribute_names(self) -> list[str]:
        return [name for name, _ in self.attributes]

    def child_elements(self) -> list[XmlElement]:
        """Nur die Kindelemente, ohne Textknoten."""
        return [c for c in self.children if isinstance(c, XmlElement)]


XmlNode = Union[XmlElement, XmlText]

XmlElement.model_rebuild()
