import re
from datetime import datetime
from typing import Any
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ValidationError

from game_save.encoders.fields import FieldRule, included_fields
from game_save.exceptions import SaveDecodeException, SaveEncodeException
from game_save.logger import logger
from game_save.model import Gender, SaveRecord

module_logger = logger.getChild("encoders.xml")

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
XML_ROOT_TAG = "GameSave"
XML_INDENT = "  "

# Anything outside the XML 1.0 Char production
INVALID_XML_CHAR = re.compile(r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")

# Literal XML representation of each gender, independent of the JSON codec
XML_GENDER_CODES: dict[Gender, str] = {
    Gender.MALE: "m",
    Gender.FEMALE: "f",
    Gender.NONE: "n",
}

XML_ITEM_FIELDS: dict[str, FieldRule] = {
    "name": FieldRule(name="Name"),
    "quantity": FieldRule(name="Quantity"),
}

XML_PLAYER_FIELDS: dict[str, FieldRule] = {
    "level": FieldRule(name="rank", attribute=True),
    "name": FieldRule(name="Name"),
    "gender": FieldRule(name="Gender"),
}

XML_SAVE_FIELDS: dict[str, FieldRule] = {
    "location": FieldRule(name="Location"),
    "player": FieldRule(name="u", children=XML_PLAYER_FIELDS),
    "items": FieldRule(name="Items", item_tag="GameItem", children=XML_ITEM_FIELDS),
    "coordinates": FieldRule(name="Coordinates", included=False),
    "created": FieldRule(name="Created"),
    "file_name": FieldRule(name="FileName"),
}


def _to_text(value: Any) -> str:
    if isinstance(value, Gender):
        return XML_GENDER_CODES[value]
    if isinstance(value, datetime):
        return value.isoformat()
    text = str(value)
    match = INVALID_XML_CHAR.search(text)
    if match:
        raise SaveEncodeException(f"Character {match.group()!r} at position {match.start()} of {text!r} is not allowed in XML")
    return text


def _build_element(tag: str, model: BaseModel, rules: dict[str, FieldRule]) -> ET.Element:
    element = ET.Element(tag)
    for field_name, rule in included_fields(rules):
        value = getattr(model, field_name)
        if rule.attribute:
            element.set(rule.name, _to_text(value))
        elif rule.item_tag is not None:
            container = ET.SubElement(element, rule.name)
            for entry in value:
                container.append(_build_element(rule.item_tag, entry, rule.children or {}))
        elif rule.children is not None:
            element.append(_build_element(rule.name, value, rule.children))
        else:
            ET.SubElement(element, rule.name).text = _to_text(value)
    return element


def encode_xml(save: SaveRecord) -> str:
    """
    Render a save record as an XML document rooted at <GameSave>.

    The player is written as <u rank="..."> and no namespace is declared.
    The record must already have passed validate().
    """
    root = _build_element(XML_ROOT_TAG, save, XML_SAVE_FIELDS)
    ET.indent(root, space=XML_INDENT)
    text = f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"
    module_logger.debug(f"Encoded '{save.file_name}' to XML ({len(text)} chars)")
    return text


def decode_xml_gender(code: str | None) -> Gender:
    for gender, xml_code in XML_GENDER_CODES.items():
        if xml_code == code:
            return gender
    return Gender.NONE


def _read_element(element: ET.Element, rules: dict[str, FieldRule]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for field_name, rule in included_fields(rules):
        if rule.attribute:
            if rule.name in element.attrib:
                fields[field_name] = element.attrib[rule.name]
            continue

        child = element.find(rule.name)
        if child is None:
            continue
        if rule.item_tag is not None:
            fields[field_name] = [_read_element(entry, rule.children or {}) for entry in child.findall(rule.item_tag)]
        elif rule.children is not None:
            fields[field_name] = _read_element(child, rule.children)
        else:
            fields[field_name] = child.text or ""
    return fields


def decode_xml(text: str) -> SaveRecord:
    """Read back a record written by encode_xml. Coordinates are not stored, so they come back as the default."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise SaveDecodeException(f"Invalid XML content: {exc}") from exc

    if root.tag != XML_ROOT_TAG:
        raise SaveDecodeException(f"Expected root element <{XML_ROOT_TAG}>, found <{root.tag}>")

    fields = _read_element(root, XML_SAVE_FIELDS)
    if "player" in fields:
        fields["player"]["gender"] = decode_xml_gender(fields["player"].get("gender"))

    try:
        return SaveRecord.model_validate(fields)
    except ValidationError as exc:
        raise SaveDecodeException(f"XML does not describe a save record: {exc}") from exc
