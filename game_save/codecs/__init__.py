from game_save.codecs.gender import decode_gender, encode_gender

__all__ = ["encode_gender", "decode_gender"]
