from typing import Any

from game_save.model import Gender

# One-character gender codes used by the JSON encoding
GENDER_TO_CODE: dict[Gender, str] = {
    Gender.MALE: "m",
    Gender.FEMALE: "f",
    Gender.NONE: "n",
}

CODE_TO_GENDER: dict[str, Gender] = {
    "m": Gender.MALE,
    "f": Gender.FEMALE,
}


def encode_gender(gender: Gender) -> str:
    return GENDER_TO_CODE[Gender(gender)]


def decode_gender(code: Any) -> Gender:
    """Anything other than exactly "m" or "f" (None, "n", garbage, non-strings) decodes to Gender.NONE."""
    if not isinstance(code, str):
        return Gender.NONE
    return CODE_TO_GENDER.get(code, Gender.NONE)
