import pytest

from property_feed.core.errors import FeedParseError
from property_feed.services.xml_tree import parse_xml


def test_single_child_stays_a_node_and_repeats_become_lists():
    tree = parse_xml("<properties><property><id>1</id></property></properties>")
    assert tree == {"properties": {"property": {"id": "1"}}}

    tree = parse_xml("<properties><property><id>1</id></property><property><id>2</id></property></properties>")
    assert tree["properties"]["property"] == [{"id": "1"}, {"id": "2"}]


def test_attributes_and_text_are_kept_together():
    tree = parse_xml('<types><type id="tolet">  To Let </type><type>Office</type></types>')
    assert tree["types"]["type"] == [{"$": {"id": "tolet"}, "_": "To Let"}, "Office"]


def test_empty_elements_collapse_to_empty_string():
    tree = parse_xml("<property><summary/><epc><rating grade='B'/></epc></property>")
    assert tree["property"]["summary"] == ""
    assert tree["property"]["epc"] == {"rating": {"$": {"grade": "B"}}}


def test_namespaces_are_stripped_from_tags():
    tree = parse_xml('<p:properties xmlns:p="urn:feed"><p:property><p:id>9</p:id></p:property></p:properties>')
    assert tree == {"properties": {"property": {"id": "9"}}}


def test_malformed_xml_raises_parse_error():
    with pytest.raises(FeedParseError):
        parse_xml("<properties><property></properties>")
