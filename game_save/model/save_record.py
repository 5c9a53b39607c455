from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from game_save.model.item import Item
from game_save.model.player import Player


class SaveRecord(BaseModel):
    """
    One game save: the unit of validation and encoding.

    `coordinates` only lives in memory, neither encoder writes it.
    `file_name` names the output artifacts and is not derived from the content.
    """
    model_config = ConfigDict(frozen=True)

    location: str = ""
    player: Player = Field(default_factory=Player)
    items: tuple[Item, ...] = ()
    coordinates: tuple[float, float] = (0.0, 0.0)
    created: datetime = Field(default_factory=datetime.now)
    file_name: str = ""
