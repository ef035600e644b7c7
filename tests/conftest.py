import json
from collections.abc import Callable
from pathlib import Path

import pytest

from product_tops.item import Item

WriteFile = Callable[[str, str], Path]


@pytest.fixture
def write_file(tmp_path: Path) -> WriteFile:
    def write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def write_json(write_file: WriteFile) -> Callable[[str, object], Path]:
    def write(name: str, data: object) -> Path:
        return write_file(name, json.dumps(data))

    return write


class Recorder:
    def __init__(self) -> None:
        self.items: list[Item] = []

    def __call__(self, item: Item) -> None:
        self.items.append(item)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
