"""JSON dataset reader implementation.

This module streams a top-level JSON array of product objects using ijson,
validating each element into an Item without loading the whole document.
"""

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path

import ijson
from pydantic import TypeAdapter, ValidationError
from typing_extensions import Unpack, override

from product_tops import reader
from product_tops.errors import ParseError, ReadError
from product_tops.item import Item, OnItemRead

logger = logging.getLogger(__name__)


class Reader(reader.Reader):
    """Reader for JSON files holding an array of product objects.

    Each element must be an object with ``product``, ``price`` and
    ``rating`` keys; other keys are ignored. Malformed documents raise
    ParseError instead of aborting the process.
    """

    _validator = TypeAdapter(Item)

    def __init__(self, file: Path, /, **kwargs: Unpack[reader.ReaderKwargs]) -> None:
        """Initialize the JSON reader.

        Args:
            file: Path to the JSON file.
            **kwargs: Additional configuration parameters. ``encoding`` is
                ignored, the document is always decoded as UTF-8.
        """
        self.file = Path(file)
        self.callbacks: list[OnItemRead] = []

    @override
    @classmethod
    def identify(cls, file: Path) -> bool:
        return str(file).endswith(".json")

    @override
    def read(self) -> None:
        logger.debug("reading %s as json", self.file)
        count = 0
        with contextlib.closing(self._iter_items()) as items:
            for item in items:
                self._dispatch(item)
                count += 1
        logger.debug("read %d items from %s", count, self.file)

    def _iter_items(self) -> Iterator[Item]:
        try:
            f = self.file.open("rb")
        except OSError as e:
            raise ReadError(self.file) from e
        with f:
            events = ijson.parse(f)
            try:
                _, event, _ = next(events)
            except StopIteration:
                msg = "empty document"
                raise ParseError(msg) from None
            except ijson.JSONError as e:
                raise ParseError(str(e)) from e
            if event != "start_array":
                msg = f"expected top-level array, got {event}"
                raise ParseError(msg)

            elements = ijson.items(events, "item")
            index = 0
            while True:
                try:
                    element = next(elements)
                except StopIteration:
                    return
                except ijson.JSONError as e:
                    raise ParseError(str(e)) from e
                except OSError as e:
                    raise ReadError(self.file) from e
                index += 1
                try:
                    item = self._validator.validate_python(element)
                except ValidationError as e:
                    raise ParseError(str(e), row=index) from e
                yield item
