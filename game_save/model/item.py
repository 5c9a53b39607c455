from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    # quantity may be negative here; validate() rejects it before encoding
    model_config = ConfigDict(frozen=True)

    name: str = ""
    quantity: int = 0
