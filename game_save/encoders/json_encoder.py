import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ValidationError

from game_save.codecs import decode_gender, encode_gender
from game_save.encoders.fields import FieldRule, included_fields
from game_save.exceptions import SaveDecodeException
from game_save.logger import logger
from game_save.model import Gender, SaveRecord

module_logger = logger.getChild("encoders.json")

JSON_INDENT = 2

JSON_ITEM_FIELDS: dict[str, FieldRule] = {
    "name": FieldRule(name="name"),
    "quantity": FieldRule(name="quantity"),
}

JSON_PLAYER_FIELDS: dict[str, FieldRule] = {
    "level": FieldRule(name="level"),
    "name": FieldRule(name="name"),
    "gender": FieldRule(name="gender"),
}

JSON_SAVE_FIELDS: dict[str, FieldRule] = {
    "location": FieldRule(name="location"),
    "player": FieldRule(name="u", children=JSON_PLAYER_FIELDS),
    "items": FieldRule(name="items", sequence=True, children=JSON_ITEM_FIELDS),
    "coordinates": FieldRule(name="coordinates", included=False),
    "created": FieldRule(name="created"),
    "file_name": FieldRule(name="fileName"),
}


def _render_value(value: Any, rule: FieldRule) -> Any:
    if isinstance(value, BaseModel):
        return _render_fields(value, rule.children or {})
    if isinstance(value, (list, tuple)):
        return [_render_value(element, rule) for element in value]
    if isinstance(value, Gender):
        return encode_gender(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _render_fields(model: BaseModel, rules: dict[str, FieldRule]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for field_name, rule in included_fields(rules):
        data[rule.name] = _render_value(getattr(model, field_name), rule)
    return data


def to_json_dict(save: SaveRecord) -> dict[str, Any]:
    return _render_fields(save, JSON_SAVE_FIELDS)


def encode_json(save: SaveRecord) -> str:
    """
    Render a save record as indented JSON.

    The record must already have passed validate(); nothing is re-checked here.
    Non-ASCII text is written as-is, not as \\u escapes.
    """
    text = json.dumps(to_json_dict(save), indent=JSON_INDENT, ensure_ascii=False)
    module_logger.debug(f"Encoded '{save.file_name}' to JSON ({len(text)} chars)")
    return text


def _read_fields(data: Any, rules: dict[str, FieldRule]) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SaveDecodeException(f"Expected a JSON object, got {type(data).__name__}")

    fields: dict[str, Any] = {}
    for field_name, rule in included_fields(rules):
        if rule.name not in data:
            continue
        value = data[rule.name]
        if rule.children is not None:
            if rule.sequence:
                if not isinstance(value, list):
                    raise SaveDecodeException(f"Expected a JSON array for '{rule.name}', got {type(value).__name__}")
                value = [_read_fields(element, rule.children) for element in value]
            else:
                value = _read_fields(value, rule.children)
        fields[field_name] = value
    return fields


def decode_json(text: str) -> SaveRecord:
    """Read back a record written by encode_json. Coordinates are not stored, so they come back as the default."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SaveDecodeException(f"Invalid JSON content: {exc}") from exc

    fields = _read_fields(data, JSON_SAVE_FIELDS)
    if "player" in fields:
        fields["player"]["gender"] = decode_gender(fields["player"].get("gender"))

    try:
        return SaveRecord.model_validate(fields)
    except ValidationError as exc:
        raise SaveDecodeException(f"JSON does not describe a save record: {exc}") from exc
