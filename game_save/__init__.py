from game_save.codecs import decode_gender, encode_gender
from game_save.encoders import decode_json, decode_xml, encode_json, encode_xml
from game_save.exceptions import (GameSaveException, InvalidItemQuantityException,
                                  NullRecordException, SaveDecodeException, SaveEncodeException)
from game_save.model import Gender, Item, Player, SaveRecord
from game_save.storage import save_json, save_xml
from game_save.validation import validate
import importlib.metadata


try:
    __version__ = importlib.metadata.version("game-save")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"  # Fallback when running from a source tree that isn't installed

__all__ = ["Gender", "Item", "Player", "SaveRecord",
           "validate", "encode_json", "decode_json", "encode_xml", "decode_xml",
           "encode_gender", "decode_gender", "save_json", "save_xml",
           "GameSaveException", "NullRecordException", "InvalidItemQuantityException",
           "SaveDecodeException", "SaveEncodeException", "__version__"]
