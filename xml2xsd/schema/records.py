"""Datenmodell der Strukturanalyse.

Ein ElementRecord fasst alle Instanzen eines Tag-Namens zusammen,
unabhängig davon, wo im Dokument sie vorkommen (ein globaler Typ pro Tag).

Mengen werden als dict mit None-Werten geführt: eindeutig wie ein set,
aber in Einfügereihenfolge – die Ausgabe darf nicht von der
Hash-Reihenfolge abhängen.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ElementRecord:
    """Akkumulierte Struktur eines Tag-Namens."""

    tag: str
    attribute_names: dict[str, None] = field(default_factory=dict)
    child_tag_names: dict[str, None] = field(default_factory=dict)
    has_text: bool = False
    # Reihenfolge der Kinder der ersten Instanz; später neue Kinder hinten dran.
    # Nur Darstellungshinweis, keine Strukturregel.
    child_order: list[str] = field(default_factory=list)

    @property
    def has_attributes(self) -> bool:
        return bool(self.attribute_names)

    @property
    def has_children(self) -> bool:
        return bool(self.child_tag_names)

    @property
    def is_simple_text(self) -> bool:
        """Nur Text, keine Attribute, keine Kinder → reicht xs:string."""
        return self.has_text and not self.has_attributes and not self.has_children

    def add_attribute(self, name: str) -> None:
        self.attribute_names.setdefault(name, None)

    def add_child(self, name: str) -> None:
        self.child_tag_names.setdefault(name, None)
        if name not in self.child_order:
            self.child_order.append(name)

    def ordered_children(self) -> list[str]:
        """Kinder für die Sequenz: erst child_order, dann noch fehlende Namen."""
        ordered = list(self.child_order)
        ordered.extend(
            name for name in self.child_tag_names if name not in self.child_order
        )
        return ordered


# Tag-Name → Record, in Reihenfolge des ersten Auftretens
RecordMap = dict[str, ElementRecord]
