from game_save.exceptions import InvalidItemQuantityException, NullRecordException
from game_save.model import SaveRecord


def validate(save: SaveRecord | None) -> None:
    """
    Check a save record before it gets encoded.

    Items are scanned in order and the first one with a negative quantity raises
    InvalidItemQuantityException; later items are not inspected.
    Raises NullRecordException when no record is given at all.
    """
    if save is None:
        raise NullRecordException()

    for item in save.items:
        if item.quantity < 0:
            raise InvalidItemQuantityException(item.name, item.quantity)
