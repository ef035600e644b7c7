"""Errors raised while locating and reading product datasets."""

from pathlib import Path


class ReaderError(Exception):
    """Base class for all dataset reading errors."""


class MissingFileError(ReaderError):
    """Raised when the dataset path does not name an existing regular file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"file not exists: {path}")


class UnknownFormatError(ReaderError):
    """Raised for an unsupported file type or a row of the wrong shape."""

    def __init__(self, path: Path, detail: str | None = None) -> None:
        self.path = path
        self.detail = detail
        msg = f"unknown filetype: {path}"
        if detail is not None:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class ParseError(ReaderError):
    """Raised when a row or element cannot be parsed into an item.

    Attributes:
        row: 1-based row (CSV, header included) or element (JSON) index,
            or None when the failure is not tied to a single record.
    """

    def __init__(self, message: str, *, row: int | None = None) -> None:
        self.row = row
        if row is not None:
            message = f"{message} at row {row}"
        super().__init__(message)


class ReadError(ReaderError):
    """Raised when the dataset cannot be opened or decoded."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"cannot read file: {path}")
