"""Base module for reading product datasets.

This module defines the Reader protocol shared by every dataset format.
A reader is bound to a single file, collects observer callbacks through
``on_read_item`` and then streams items to them with ``read``, so that
aggregation code never needs to know which format is being read.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from typing_extensions import TypedDict

from product_tops.item import Item, OnItemRead


class ReaderKwargs(TypedDict, total=False):
    """Optional configuration accepted by readers and the reader factory.

    Attributes:
        encoding: Text encoding of CSV files, ``"utf-8"`` by default. JSON
            readers ignore it: ijson reads raw bytes and always decodes
            them as UTF-8.
    """

    encoding: str


class Reader(Protocol):
    """Abstract base class for dataset readers.

    Implementations parse one physical file into Item records and fan each
    record out to the registered callbacks, in registration order, stopping
    at the first error.
    """

    file: Path
    callbacks: list[OnItemRead]

    @classmethod
    @abstractmethod
    def identify(cls, file: Path) -> bool:
        """Check if the reader can handle the given file.

        Args:
            file: Path to the file to check.

        Returns:
            True if the reader can handle the file, False otherwise.
        """
        ...

    @abstractmethod
    def read(self) -> None:
        """Read the file and pass every item to the registered callbacks.

        Raises:
            ReadError: If the file cannot be opened or decoded.
            ParseError: If a record cannot be parsed.
            UnknownFormatError: If a record has the wrong shape.
            Exception: Whatever a callback raises, unchanged.
        """
        ...

    def on_read_item(self, callback: OnItemRead, /) -> None:
        """Register a callback invoked once per item during ``read``.

        Registering never triggers a read. The same callback may be
        registered more than once and then fires once per registration.
        """
        self.callbacks.append(callback)

    def _dispatch(self, item: Item) -> None:
        for callback in self.callbacks:
            callback(item)
