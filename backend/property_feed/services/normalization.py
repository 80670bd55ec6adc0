import logging
import math
import re
from typing import Any, List, Mapping, Optional

from property_feed.schemas.property import Contact, PropertyRecord
from property_feed.services.xml_tree import ATTRS_KEY, TEXT_KEY

logger = logging.getLogger(__name__)

NON_NUMERIC_PATTERN = re.compile(r"[^\d.\-]")
# "Approx. 1,200" and "c. 500": a dot not followed by a digit is punctuation.
STRAY_DOT_PATTERN = re.compile(r"\.(?!\d)")
RECORD_ID_PATTERN = re.compile(r"\d+")
NUMBER_PATTERN = re.compile(r"-?\d*\.?\d+")

TO_LET_MARKERS = ("to let", "tolet")
FOR_SALE_MARKERS = ("for sale", "forsale")


def as_list(node: Any) -> List[Any]:
    if node is None or node == "":
        return []
    if isinstance(node, list):
        return node
    return [node]


def as_text(node: Any) -> str:
    if node is None or isinstance(node, bool):
        return ""
    if isinstance(node, str):
        return node.strip()
    if isinstance(node, (int, float)):
        return "" if isinstance(node, float) and not math.isfinite(node) else str(node)
    if isinstance(node, Mapping):
        return as_text(node.get(TEXT_KEY))
    return ""


def as_number(node: Any) -> float:
    if isinstance(node, bool):
        return math.nan
    if isinstance(node, (int, float)):
        value = float(node)
        return value if math.isfinite(value) else math.nan

    cleaned = NON_NUMERIC_PATTERN.sub("", STRAY_DOT_PATTERN.sub("", as_text(node)))
    if not cleaned:
        return math.nan
    try:
        value = float(cleaned)
    except ValueError:
        # "12.50-15.00" and friends: take the first number in the string.
        match = NUMBER_PATTERN.search(cleaned)
        if not match:
            return math.nan
        value = float(match.group(0))
    return value if math.isfinite(value) else math.nan


def _optional_number(node: Any) -> Optional[float]:
    value = as_number(node)
    return value if math.isfinite(value) else None


def _optional_text(node: Any) -> Optional[str]:
    return as_text(node) or None


def _child(node: Any, key: str) -> Any:
    """Look up ``key`` as a child element, falling back to an attribute."""
    if not isinstance(node, Mapping):
        return None
    if key in node:
        return node[key]
    attrs = node.get(ATTRS_KEY)
    if isinstance(attrs, Mapping):
        return attrs.get(key)
    return None


def _path(node: Any, *keys: str) -> Any:
    for key in keys:
        node = _child(node, key)
        if node is None:
            return None
    return node


def extract_properties(tree: Mapping[str, Any]) -> List[Any]:
    return as_list(_path(tree, "properties", "property"))


def is_available(node: Any) -> bool:
    status = as_text(_child(node, "status")).lower()
    return not status or "available" in status


def availability_flags(node: Any) -> tuple[bool, bool]:
    labels: List[str] = []
    for item in as_list(_path(node, "availabilities", "type")):
        labels.append(as_text(item))
        labels.append(as_text(_path(item, ATTRS_KEY, "id")))
    joined = " ".join(label for label in labels if label).lower()
    to_let = any(marker in joined for marker in TO_LET_MARKERS)
    for_sale = any(marker in joined for marker in FOR_SALE_MARKERS)
    return to_let, for_sale


def extract_images(node: Any) -> List[str]:
    urls: List[str] = []
    for image in as_list(_path(node, "images", "image")):
        url = as_text(image) or as_text(_child(image, "url"))
        if url:
            urls.append(url)
    return list(dict.fromkeys(urls))  # preserve order, drop duplicates


def extract_contacts(node: Any) -> List[Contact]:
    contacts: List[Contact] = []
    for entry in as_list(_path(node, "contacts", "contact")):
        name = as_text(_child(entry, "name"))
        if not name:
            parts = [as_text(_child(entry, "forename")), as_text(_child(entry, "surname"))]
            name = " ".join(part for part in parts if part)
        contact = Contact(
            name=name,
            email=as_text(_child(entry, "email")),
            phone=as_text(_child(entry, "phone")),
            mobile=as_text(_child(entry, "mobile")),
            company=as_text(_child(entry, "company")),
        )
        if not contact.is_empty():
            contacts.append(contact)
    return contacts


def extract_epc_rating(node: Any) -> str:
    ratings = as_list(_path(node, "epc", "rating"))
    if not ratings:
        return ""
    first = ratings[0]
    grade = as_text(_child(first, "grade")) or as_text(first)
    value = as_text(_child(first, "value"))
    if value:
        return f"{grade} ({value})".strip()
    return grade


def _brochure_url(node: Any) -> Optional[str]:
    for entry in as_list(_path(node, "files", "file")):
        url = as_text(_child(entry, "url"))
        if url:
            return url
    return None


def _record_id(node: Any, position: int) -> int:
    for key in ("id", "object_id"):
        text = as_text(_child(node, key))
        if RECORD_ID_PATTERN.fullmatch(text):
            return int(text)
    return position


def normalize_property(node: Any, position: int) -> PropertyRecord:
    to_let, for_sale = availability_flags(node)
    return PropertyRecord(
        id=_record_id(node, position),
        address=as_text(_child(node, "address1")),
        town=as_text(_child(node, "town")),
        postcode=as_text(_child(node, "postcode")),
        lat=as_number(_child(node, "lat")),
        lon=as_number(_child(node, "lon")),
        types=[text for text in (as_text(t) for t in as_list(_path(node, "types", "type"))) if text],
        to_let=to_let,
        for_sale=for_sale,
        size_from_sqft=_optional_number(_child(node, "size_from_sqft")),
        size_to_sqft=_optional_number(_child(node, "size_to_sqft")),
        summary=_optional_text(_child(node, "specification_summary")),
        description=_optional_text(_child(node, "specification_description")),
        features=[text for text in (as_text(f) for f in as_list(_path(node, "features", "feature"))) if text],
        rent_psf=_optional_number(_child(node, "rent")),
        rent=_optional_text(_child(node, "rent")),
        business_rates_psf=_optional_number(_child(node, "business_rates")),
        rateable_value=_optional_number(_child(node, "rateable_value")),
        service_charge=_optional_text(_child(node, "service_charge")),
        estate_charge=_optional_text(_child(node, "estate_charge")),
        epc_rating=extract_epc_rating(node),
        images=extract_images(node),
        brochure_url=_brochure_url(node),
        contacts=extract_contacts(node),
        last_updated=_optional_text(_child(node, "last_updated")) or _optional_text(_child(node, "created")),
    )


def normalize_feed(tree: Mapping[str, Any]) -> List[PropertyRecord]:
    nodes = extract_properties(tree)
    logger.info("Found %s properties", len(nodes))

    records: List[PropertyRecord] = []
    for position, node in enumerate(nodes, start=1):
        if not is_available(node):
            continue
        records.append(normalize_property(node, position))

    logger.info("Kept %s available properties, skipped %s", len(records), len(nodes) - len(records))
    return records
