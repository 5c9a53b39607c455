from game_save.model.gender import Gender
from game_save.model.item import Item
from game_save.model.player import Player
from game_save.model.save_record import SaveRecord

__all__ = ["Gender", "Item", "Player", "SaveRecord"]
