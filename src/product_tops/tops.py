"""Top price and top rating aggregation.

Aggregators are plain reader callbacks: each keeps the best item seen so
far, and ``find_tops`` wires two of them to a reader for a dataset path.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from operator import attrgetter

from typing_extensions import Unpack

from product_tops.factory import new_reader_from_path
from product_tops.item import Item
from product_tops.reader import ReaderKwargs

logger = logging.getLogger(__name__)


class TopItem:
    """Callback remembering the item with the greatest key.

    Only a strictly greater key replaces the current best, so on ties the
    earliest item wins.
    """

    def __init__(self, key: Callable[[Item], int], /) -> None:
        self.key = key
        self.best: Item | None = None

    def __call__(self, item: Item) -> None:
        if self.best is None or self.key(item) > self.key(self.best):
            self.best = item


def max_price() -> TopItem:
    """Create a callback tracking the item with the highest price."""
    return TopItem(attrgetter("price"))


def max_rating() -> TopItem:
    """Create a callback tracking the item with the highest rating."""
    return TopItem(attrgetter("rating"))


@dataclass(frozen=True)
class Tops:
    """Best items of a dataset; None when the dataset holds no items."""

    price: Item | None
    rating: Item | None


def find_tops(path: str | os.PathLike[str], /, **kwargs: Unpack[ReaderKwargs]) -> Tops:
    """Read a dataset and return its top price and top rating items.

    Raises:
        ReaderError: If the dataset cannot be located or read.
    """
    reader = new_reader_from_path(path, **kwargs)
    top_price = max_price()
    top_rating = max_rating()
    reader.on_read_item(top_price)
    reader.on_read_item(top_rating)
    reader.read()
    logger.debug("top price %s, top rating %s", top_price.best, top_rating.best)
    return Tops(price=top_price.best, rating=top_rating.best)
