from pydantic import BaseModel, ConfigDict

from game_save.model.gender import Gender


class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = 0
    name: str = ""
    gender: Gender = Gender.NONE
