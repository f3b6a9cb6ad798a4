"""Line sources feeding the settings file parser."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

LineSource = Callable[[str, str], list[str]]


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a text file into a list of lines without line terminators.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """

    with open(path, "r", encoding=encoding) as stream:
        return stream.read().splitlines()
