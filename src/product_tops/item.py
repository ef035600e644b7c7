"""Product record shared by every reader.

This module defines the immutable Item record produced by readers and the
callback type used to observe records as they are read.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """One product row from a dataset.

    Items are frozen, so every observer of a read sees the same values no
    matter what other observers do with the instance.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    product: str
    price: int
    rating: int


OnItemRead = Callable[[Item], None]
