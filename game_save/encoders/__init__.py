from game_save.encoders.json_encoder import decode_json, encode_json
from game_save.encoders.xml_encoder import decode_xml, encode_xml

__all__ = ["encode_json", "decode_json", "encode_xml", "decode_xml"]
