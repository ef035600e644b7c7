"""CSV dataset reader implementation.

This module reads comma separated product tables using pyexcel. The first
row is a header and is skipped; every other row must hold exactly three
fields: product, price and rating.
"""

import contextlib
import csv
import logging
import re
from collections.abc import Iterator
from pathlib import Path

import pyexcel
from typing_extensions import Unpack, override

from product_tops import reader
from product_tops.errors import ParseError, ReadError, UnknownFormatError
from product_tops.item import Item, OnItemRead

logger = logging.getLogger(__name__)

_FIELD_COUNT = 3
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class Reader(reader.Reader):
    """Reader for CSV files.

    Uses pyexcel to stream rows with cell type detection turned off, so that
    price and rating are parsed here with strict base-10 rules.
    """

    def __init__(self, file: Path, /, **kwargs: Unpack[reader.ReaderKwargs]) -> None:
        """Initialize the CSV reader.

        Args:
            file: Path to the CSV file.
            **kwargs: Additional configuration parameters.
        """
        self.file = Path(file)
        self.encoding = kwargs.get("encoding", "utf-8")
        self.callbacks: list[OnItemRead] = []

    @override
    @classmethod
    def identify(cls, file: Path) -> bool:
        return str(file).endswith(".csv")

    @override
    def read(self) -> None:
        logger.debug("reading %s as csv", self.file)
        count = 0
        with contextlib.closing(self.__iter_rows()) as rows:
            for index, row in enumerate(rows, start=1):
                if index == 1:
                    continue
                if len(row) != _FIELD_COUNT:
                    raise UnknownFormatError(
                        self.file, f"row {index} has {len(row)} fields"
                    )
                self._dispatch(
                    Item(
                        product=row[0],
                        price=self.__parse_int(row[1], "price", index),
                        rating=self.__parse_int(row[2], "rating", index),
                    )
                )
                count += 1
        logger.debug("read %d items from %s", count, self.file)

    def __iter_rows(self) -> Iterator[list[str]]:
        try:
            f = self.file.open(encoding=self.encoding, newline="")
        except OSError as e:
            raise ReadError(self.file) from e
        with f:
            try:
                for row in pyexcel.iget_array(
                    file_stream=f,
                    file_type="csv",
                    auto_detect_int=False,
                    auto_detect_float=False,
                    auto_detect_datetime=False,
                    keep_trailing_empty_cells=True,
                    skip_empty_rows=True,
                ):
                    yield [self.__convert(value) for value in row]
            except (OSError, UnicodeDecodeError) as e:
                raise ReadError(self.file) from e
            except csv.Error as e:
                raise ParseError(str(e)) from e
            finally:
                pyexcel.free_resources()

    def __parse_int(self, value: str, field: str, row: int) -> int:
        if _INTEGER_PATTERN.fullmatch(value) is None:
            msg = f"error parse {field} {value!r}"
            raise ParseError(msg, row=row)
        return int(value)

    def __convert(self, value: object) -> str:
        return "" if value is None else str(value)
