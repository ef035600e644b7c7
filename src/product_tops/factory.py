"""Reader selection by file name.

This module picks the reader implementation for a dataset path, so callers
only deal with the Reader protocol.
"""

import logging
import os
from pathlib import Path

from typing_extensions import Unpack

from product_tops.errors import MissingFileError, UnknownFormatError
from product_tops.reader import Reader, ReaderKwargs
from product_tops.readers import csv_table, json_array

logger = logging.getLogger(__name__)

READERS: tuple[type[Reader], ...] = (json_array.Reader, csv_table.Reader)


def new_reader_from_path(
    path: str | os.PathLike[str], /, **kwargs: Unpack[ReaderKwargs]
) -> Reader:
    """Create the reader matching the dataset's file name.

    The file must exist but is not opened here.

    Args:
        path: Dataset path; surrounding whitespace is ignored.
        **kwargs: Configuration forwarded to the reader.

    Returns:
        A reader bound to the file, with no callbacks registered.

    Raises:
        MissingFileError: If the path is missing or is a directory.
        UnknownFormatError: If no reader handles the file name.
    """
    file = Path(os.fspath(path).strip())
    if not file.is_file():
        raise MissingFileError(file)
    for reader_cls in READERS:
        if reader_cls.identify(file):
            logger.debug("selected %s for %s", reader_cls.__module__, file)
            return reader_cls(file, **kwargs)
    raise UnknownFormatError(file)
