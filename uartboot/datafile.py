"""Helpers for the big-endian word files used alongside the boot loader."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from functools import partial
from pathlib import Path

log = logging.getLogger(__name__)

_WORD_SIZE = 4


class WordLog:
    """Write 32-bit big-endian words at an advancing position in a file.

    Each append reopens the file for writing, which clears what was there;
    the bytes before the write position then read back as zeros.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.position = 0

    def append(self, value: int) -> int:
        """Write ``value`` at the current position and return the new position."""
        if not 0 <= value < 1 << 32:
            raise ValueError(f"value {value} does not fit in 32 bits")
        log.debug("data: %d", value)
        with self.path.open("wb") as handle:
            handle.seek(self.position)
            handle.write(value.to_bytes(_WORD_SIZE, "big"))
        self.position += _WORD_SIZE
        log.debug("wpos: %d", self.position)
        return self.position


def read_words(path: str | os.PathLike[str]) -> list[int]:
    """Read a file as 32-bit big-endian words; a short tail reads as zero."""
    with open(path, "rb") as handle:
        return [
            int.from_bytes(chunk, "big") if len(chunk) == _WORD_SIZE else 0
            for chunk in iter(partial(handle.read, _WORD_SIZE), b"")
        ]


def read_bytes_at(path: str | os.PathLike[str], offsets: Iterable[int]) -> bytes:
    """Return the byte found at each of ``offsets`` in the file."""
    found = bytearray()
    with open(path, "rb") as handle:
        for offset in offsets:
            handle.seek(offset)
            byte = handle.read(1)
            if not byte:
                raise IndexError(f"offset {offset} is past the end of {path}")
            found += byte
    log.debug("bytes: %s", list(found))
    return bytes(found)