"""Gemeinsame Fixtures und Baum-Helfer für die Tests."""

from __future__ import annotations

import logging

import pytest

import xml2xsd.config as config
from xml2xsd.logging_config import ROOT_LOGGER_NAME
from xml2xsd.xml.models import XmlElement, XmlNode, XmlText


def el(tag: str, *children: XmlNode | str, **attrs: str) -> XmlElement:
    """Baut ein XmlElement; Strings werden zu Textknoten."""
    nodes = [XmlText(value=c) if isinstance(c, str) else c for c in children]
    return XmlElement(tag=tag, attributes=list(attrs.items()), children=nodes)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Settings-Singleton zurücksetzen; keine .env aus dem Arbeitsverzeichnis."""
    monkeypatch.chdir(tmp_path)
    for name in ("XML2XSD_LOG_LEVEL", "XML2XSD_LOG_DIR", "XML2XSD_DEFAULT_OUTPUT_NAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture(autouse=True)
def reset_logging():
    """Von main() installierte Handler wieder entfernen (capsys-Streams sind danach zu)."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
