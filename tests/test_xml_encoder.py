import pytest
from datetime import datetime
from xml.etree import ElementTree as ET

from game_save.encoders import decode_xml, encode_xml
from game_save.encoders.xml_encoder import XML_SAVE_FIELDS, XML_PLAYER_FIELDS, XML_ITEM_FIELDS
from game_save.exceptions import SaveDecodeException, SaveEncodeException
from game_save.model import Gender, Item, Player, SaveRecord


def forest_save(gender: Gender = Gender.MALE) -> SaveRecord:
    return SaveRecord(
        location="Темный лес",
        player=Player(level=15, name="Рыцарь", gender=gender),
        items=[Item(name="Sword", quantity=1), Item(name="Shield", quantity=2)],
        coordinates=(100.5, 200.3),
        created=datetime(2024, 5, 1, 12, 30),
        file_name="forest_save",
    )


def test_encode_xml_structure():
    root = ET.fromstring(encode_xml(forest_save()))

    assert root.tag == "GameSave"
    assert [child.tag for child in root] == ["Location", "u", "Items", "Created", "FileName"]
    assert root.findtext("Location") == "Темный лес"
    assert root.findtext("Created") == "2024-05-01T12:30:00"
    assert root.findtext("FileName") == "forest_save"


def test_encode_xml_level_is_rank_attribute():
    root = ET.fromstring(encode_xml(forest_save()))
    player = root.find("u")

    assert player is not None
    assert player.attrib == {"rank": "15"}
    assert player.find("Level") is None
    assert player.find("rank") is None
    assert [child.tag for child in player] == ["Name", "Gender"]
    assert player.findtext("Name") == "Рыцарь"


def test_encode_xml_items_in_order():
    root = ET.fromstring(encode_xml(forest_save()))
    items = root.find("Items").findall("GameItem")

    assert [(item.findtext("Name"), item.findtext("Quantity")) for item in items] == [("Sword", "1"), ("Shield", "2")]


def test_encode_xml_omits_coordinates_and_namespace():
    text = encode_xml(forest_save())
    root = ET.fromstring(text)

    assert root.find("Coordinates") is None
    assert "100.5" not in text
    assert "xmlns" not in text
    assert all("}" not in element.tag for element in root.iter())


def test_encode_xml_document_layout():
    text = encode_xml(forest_save())

    assert text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<GameSave>\n  <Location>')
    assert "Темный лес" in text
    assert "&#" not in text


@pytest.mark.parametrize("gender, code", [(Gender.MALE, "m"), (Gender.FEMALE, "f"), (Gender.NONE, "n")])
def test_encode_xml_gender_codes(gender, code):
    root = ET.fromstring(encode_xml(forest_save(gender)))
    assert root.find("u").findtext("Gender") == code


def test_encode_xml_escapes_markup_in_text():
    save = SaveRecord(location="<Dungeon> & co", items=[Item(name='"Quoted"', quantity=1)])
    root = ET.fromstring(encode_xml(save))
    assert root.findtext("Location") == "<Dungeon> & co"


def test_field_tables_cover_every_model_field():
    assert set(XML_SAVE_FIELDS) == set(SaveRecord.model_fields)
    assert set(XML_PLAYER_FIELDS) == set(Player.model_fields)
    assert set(XML_ITEM_FIELDS) == set(Item.model_fields)
    assert XML_PLAYER_FIELDS["level"].attribute is True
    assert XML_SAVE_FIELDS["coordinates"].included is False


def test_decode_xml_reads_back_encoded_save():
    save = forest_save(Gender.FEMALE)
    decoded = decode_xml(encode_xml(save))

    assert decoded.model_dump(exclude={"coordinates"}) == save.model_dump(exclude={"coordinates"})
    assert decoded.coordinates == (0.0, 0.0)


def test_decode_xml_unknown_gender_code_is_none():
    text = "<GameSave><u rank='3'><Name>Thief</Name><Gender>?</Gender></u><Items /></GameSave>"
    decoded = decode_xml(text)

    assert decoded.player.gender is Gender.NONE
    assert decoded.player.level == 3
    assert decoded.items == ()


@pytest.mark.parametrize(
    "text",
    [
        "<GameSave><Location>",
        "<SaveGame><Location>Cave</Location></SaveGame>",
        "<GameSave><u rank='high'><Name>Thief</Name></u></GameSave>",
    ],
)
def test_decode_xml_rejects_malformed_input(text):
    with pytest.raises(SaveDecodeException):
        decode_xml(text)


@pytest.mark.parametrize(
    "save",
    [
        SaveRecord(location="Cave\x01"),
        SaveRecord(player=Player(name="Ghost\x00")),
        SaveRecord(items=[Item(name="Rune\ufffe", quantity=1)]),
        SaveRecord(file_name="save\x1b"),
    ],
)
def test_encode_xml_rejects_characters_xml_cannot_hold(save):
    with pytest.raises(SaveEncodeException):
        encode_xml(save)


def test_encode_xml_keeps_allowed_control_characters():
    save = SaveRecord(location="Line one\nLine two\tend", items=[Item(name="Emoji \U0001F5E1", quantity=1)])
    root = ET.fromstring(encode_xml(save))

    assert root.findtext("Location") == "Line one\nLine two\tend"
    assert root.find("Items").find("GameItem").findtext("Name") == "Emoji \U0001F5E1"
