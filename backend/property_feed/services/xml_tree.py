"""Parse XML into plain dict/list/str trees.

Repeated sibling elements become lists, single elements stay single nodes.
Attributes live under ``"$"`` and text that sits next to attributes or child
elements lives under ``"_"``. Elements with nothing but text collapse to
that text.
"""
import logging
from typing import Any, Dict, Mapping
from xml.etree import ElementTree as ET

from property_feed.core.errors import FeedParseError

logger = logging.getLogger(__name__)

ATTRS_KEY = "$"
TEXT_KEY = "_"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def _element_to_node(element: ET.Element) -> Any:
    text = (element.text or "").strip()
    children = list(element)
    if not element.attrib and not children:
        return text

    node: Dict[str, Any] = {}
    if element.attrib:
        node[ATTRS_KEY] = {_local_name(key): value for key, value in element.attrib.items()}
    if text:
        node[TEXT_KEY] = text

    for child in children:
        name = _local_name(child.tag)
        value = _element_to_node(child)
        if name not in node:
            node[name] = value
        elif isinstance(node[name], list):
            node[name].append(value)
        else:
            node[name] = [node[name], value]
    return node


def parse_xml(xml: str) -> Mapping[str, Any]:
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        raise FeedParseError(f"Malformed XML feed: {exc}") from exc
    logger.debug("Parsed XML document with root <%s>", root.tag)
    return {_local_name(root.tag): _element_to_node(root)}
