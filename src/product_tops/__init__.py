"""Find the most expensive and best rated products in CSV or JSON datasets."""

from product_tops.errors import (
    MissingFileError,
    ParseError,
    ReaderError,
    ReadError,
    UnknownFormatError,
)
from product_tops.factory import new_reader_from_path
from product_tops.item import Item, OnItemRead
from product_tops.reader import Reader, ReaderKwargs
from product_tops.tops import Tops, TopItem, find_tops, max_price, max_rating

__all__ = [
    "Item",
    "MissingFileError",
    "OnItemRead",
    "ParseError",
    "ReadError",
    "Reader",
    "ReaderError",
    "ReaderKwargs",
    "TopItem",
    "Tops",
    "UnknownFormatError",
    "find_tops",
    "max_price",
    "max_rating",
    "new_reader_from_path",
]
