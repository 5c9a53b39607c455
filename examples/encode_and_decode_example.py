"""
    This example shows the save pipeline without the demo orchestration:
    build a record, validate it, encode it to both formats and read the encodings back.

    Run it from the root of the repository:

    ```bash
    python examples/encode_and_decode_example.py
    ```
"""
from datetime import datetime

from rich import print as rprint

from game_save import (Gender, InvalidItemQuantityException, Item, Player, SaveRecord,
                       decode_json, decode_xml, encode_json, encode_xml, validate)


def main():
    # 1. Build a record; coordinates stay in memory only
    save = SaveRecord(
        location="Northern pass",
        player=Player(level=21, name="Ranger", gender=Gender.FEMALE),
        items=[Item(name="Longbow", quantity=1), Item(name="Arrow", quantity=40)],
        coordinates=(12.5, -3.0),
        created=datetime.now(),
        file_name="pass_save",
    )

    # 2. Validate before encoding
    validate(save)

    # 3. Encode to both formats
    json_text = encode_json(save)
    xml_text = encode_xml(save)
    print(json_text)
    print(xml_text)

    # 4. Read them back
    rprint(decode_json(json_text))
    rprint(decode_xml(xml_text))

    # 5. A negative quantity is rejected
    broken = save.model_copy(update={"items": (Item(name="Arrow", quantity=-1),)})
    try:
        validate(broken)
    except InvalidItemQuantityException as e:
        rprint(f"[bold red]Rejected:[/bold red] {e}")


if __name__ == "__main__":
    main()
