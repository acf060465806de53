"""End-to-End-Tests der Konvertierung (lxml) und mit Ersatz-Parsern."""

import logging

import pytest

from xml2xsd.converter import generate_schema
from xml2xsd.xml.exceptions import InvalidXmlError, NoRootElementError, XmlParseError
from tests.conftest import el

CHILD_REF = '<xs:element ref="tns:{}" minOccurs="0" maxOccurs="unbounded"/>'
ATTRIBUTE = '<xs:attribute name="{}" type="xs:string" use="optional"/>'


def test_simple_document():
    xsd = generate_schema("<root><item>Data</item></root>")

    assert '<xs:element name="root" type="tns:rootType"/>' in xsd
    assert '<xs:element name="item" type="xs:string"/>' in xsd
    assert '<xs:complexType name="rootType">' in xsd
    assert CHILD_REF.format("item") in xsd


def test_attributes_and_child():
    xsd = generate_schema('<product id="123" available="true"><name>Widget</name></product>')

    assert '<xs:element name="product" type="tns:productType"/>' in xsd
    assert '<xs:element name="name" type="xs:string"/>' in xsd
    assert CHILD_REF.format("name") in xsd
    assert ATTRIBUTE.format("id") in xsd
    assert ATTRIBUTE.format("available") in xsd


def test_nested_elements():
    xsd = generate_schema(
        "<order><customer><id>C1</id></customer><items><item>I1</item></items></order>"
    )

    for tag in ("order", "customer", "items"):
        assert f'<xs:element name="{tag}" type="tns:{tag}Type"/>' in xsd
        assert f'<xs:complexType name="{tag}Type">' in xsd
    for tag in ("id", "item"):
        assert f'<xs:element name="{tag}" type="xs:string"/>' in xsd
    for child in ("customer", "items", "id", "item"):
        assert CHILD_REF.format(child) in xsd


def test_repeated_elements_yield_one_reference():
    xsd = generate_schema("<list><value>A</value><value>B</value></list>")

    assert xsd.count(CHILD_REF.format("value")) == 1
    assert xsd.count('<xs:element name="value"') == 1
    assert 'name="valueType"' not in xsd


def test_text_only_root():
    xsd = generate_schema("<message>Hello World</message>")

    assert '<xs:element name="message" type="xs:string"/>' in xsd
    assert "<xs:complexType" not in xsd


def test_self_closing_element():
    xsd = generate_schema("<data><emptyElement/></data>")

    assert '<xs:element name="data" type="tns:dataType"/>' in xsd
    assert '<xs:element name="emptyElement" type="tns:emptyElementType"/>' in xsd
    assert '<xs:complexType name="emptyElementType">' in xsd
    assert '<xs:sequence minOccurs="0"/>' in xsd


def test_attributes_with_text_use_simple_content():
    xsd = generate_schema('<measurement unit="cm">150</measurement>')

    assert '<xs:element name="measurement" type="tns:measurementType"/>' in xsd
    assert "<xs:simpleContent>" in xsd
    assert '<xs:extension base="xs:string">' in xsd
    assert ATTRIBUTE.format("unit") in xsd


def test_attributes_without_content():
    xsd = generate_schema('<config active="false"/>')

    assert '<xs:element name="config" type="tns:configType"/>' in xsd
    assert '<xs:complexType name="configType">' in xsd
    assert ATTRIBUTE.format("active") in xsd
    assert '<xs:sequence minOccurs="0"/>' in xsd


def test_mixed_content():
    xsd = generate_schema(
        "<description>This item is <highlight>very</highlight> important.</description>"
    )

    assert '<xs:complexType name="descriptionType" mixed="true">' in xsd
    assert '<xs:element name="highlight" type="xs:string"/>' in xsd
    assert CHILD_REF.format("highlight") in xsd


def test_pretty_printed_document_is_not_mixed():
    xsd = generate_schema(
        "<?xml version=\"1.0\"?>\n"
        "<catalog>\n"
        "  <!-- Bücher -->\n"
        "  <book id=\"1\">\n"
        "    <title>A</title>\n"
        "  </book>\n"
        "</catalog>\n"
    )

    assert "mixed" not in xsd
    assert '<xs:complexType name="bookType">' in xsd


def test_placeholder_namespaces():
    xsd = generate_schema("<data><value>1</value></data>")

    assert 'xmlns:xs="http://www.w3.org/2001/XMLSchema"' in xsd
    assert 'targetNamespace="http://example.com/generatedSchema"' in xsd
    assert 'xmlns:tns="http://example.com/generatedSchema"' in xsd


def test_repeated_runs_are_byte_identical():
    xml = (
        '<root b="1" a="2" c="3"><z/><y x="1">t</y><x><w>1</w></x>'
        '<y q="2" p="3">u</y><z k="v"/></root>'
    )

    assert generate_schema(xml) == generate_schema(xml)


@pytest.mark.parametrize("xml", ["", "   \n", '<?xml version="1.0"?><!-- Just a comment -->'])
def test_no_root_element(xml, caplog):
    with caplog.at_level(logging.ERROR, logger="xml2xsd"):
        with pytest.raises(NoRootElementError) as exc_info:
            generate_schema(xml)

    assert str(exc_info.value) == "Ungültiges XML: Kein Wurzelelement gefunden."
    assert not caplog.records


def test_parse_error_embeds_parser_detail(caplog):
    with caplog.at_level(logging.ERROR, logger="xml2xsd"):
        with pytest.raises(XmlParseError) as exc_info:
            generate_schema("<root><item></root>")

    assert exc_info.value.detail in str(exc_info.value)
    assert "mismatch" in str(exc_info.value)
    assert any("XML-Parserfehler" in r.getMessage() for r in caplog.records)


def test_substitute_parser_error_is_propagated():
    def failing_parser(text):
        raise XmlParseError("Simulated error\nDetails here")

    with pytest.raises(InvalidXmlError, match="Details here"):
        generate_schema("<egal/>", parser=failing_parser)


def test_substitute_parser_without_root():
    with pytest.raises(NoRootElementError):
        generate_schema("irrelevant", parser=lambda text: None)


def test_substitute_parser_tree_is_analyzed():
    tree = el("root", el("item", "Data"))

    xsd = generate_schema("ignoriert", parser=lambda text: tree)

    assert '<xs:element name="item" type="xs:string"/>' in xsd
    assert CHILD_REF.format("item") in xsd


@pytest.mark.parametrize("xml", ["hello", "Data</root>"])
def test_plain_text_raises_parse_error_not_missing_root(xml):
    with pytest.raises(XmlParseError) as exc_info:
        generate_schema(xml)

    assert not isinstance(exc_info.value, NoRootElementError)
    assert exc_info.value.detail in str(exc_info.value)


def test_internal_entity_text_counts_as_text():
    xsd = generate_schema('<!DOCTYPE r [<!ENTITY e "hello">]><r><c>&e;</c></r>')

    assert '<xs:element name="c" type="xs:string"/>' in xsd
    assert 'name="cType"' not in xsd


def test_bytes_input_with_encoding_declaration():
    data = '<?xml version="1.0" encoding="ISO-8859-1"?><größe einheit="m">1</größe>'.encode("latin-1")

    xsd = generate_schema(data)

    assert '<xs:complexType name="größeType">' in xsd
    assert ATTRIBUTE.format("einheit") in xsd
