class GameSaveException(Exception):
    """Base class for every error raised by game_save."""


class NullRecordException(GameSaveException):
    def __init__(self, message: str = "Save record is required, got None"):
        super().__init__(message)


class InvalidItemQuantityException(GameSaveException):
    def __init__(self, item_name: str, quantity: int):
        self.item_name = item_name
        self.quantity = quantity
        super().__init__(f"Item '{item_name}' has a negative quantity: {quantity}")


class SaveDecodeException(GameSaveException):
    pass


class SaveEncodeException(GameSaveException):
    pass
