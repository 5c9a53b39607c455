from pathlib import Path

from game_save.encoders import encode_json, encode_xml
from game_save.exceptions import GameSaveException
from game_save.logger import logger
from game_save.model import SaveRecord
from game_save.validation import validate

module_logger = logger.getChild("storage")


def ensure_dir(path: Path | str) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_text(path: Path | str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(content)


def read_text(path: Path | str) -> str:
    with open(path, "r", encoding="utf-8") as file:
        return file.read()


def _validated(save: SaveRecord | None, path: Path) -> SaveRecord:
    try:
        validate(save)
    except GameSaveException as e:
        module_logger.warning(f"Refusing to write {path.name}: {e}")
        raise
    return save


def save_json(save: SaveRecord | None, path: Path | str) -> Path:
    """
    Validate the record, encode it to JSON and write it to path.

    Validation errors propagate unchanged and leave path untouched: the whole document
    is encoded in memory before the file is opened.
    """
    path = Path(path)
    content = encode_json(_validated(save, path))
    write_text(path, content)
    module_logger.info(f"JSON saved: {path.name}")
    return path


def save_xml(save: SaveRecord | None, path: Path | str) -> Path:
    """Same contract as save_json, for the XML encoding."""
    path = Path(path)
    content = encode_xml(_validated(save, path))
    write_text(path, content)
    module_logger.info(f"XML saved: {path.name}")
    return path
