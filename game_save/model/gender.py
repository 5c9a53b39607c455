from enum import Enum


class Gender(str, Enum):
    MALE: str = "male"
    FEMALE: str = "female"
    NONE: str = "none"
