"""Wire frames for the UART boot loader and the firmware reader that produces them."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import BinaryIO

log = logging.getLogger(__name__)

FRAME_SIZE = 16
WORD_SIZE = 8
BOOT_TAG = b"boot"
FINAL_TAG = b"coot"
LED_ON_TEXT = b"oledon"
LED_OFF_TEXT = b"fledof"

_SEQUENCE_LIMIT = 1 << 32
_WORD_LIMIT = 1 << 64


def encode_boot_frame(sequence: int, word: int, final: bool) -> bytes:
    """Build one 16-byte frame: tag, big-endian sequence, little-endian data word."""
    if not 0 <= sequence < _SEQUENCE_LIMIT:
        raise ValueError(f"sequence {sequence} does not fit in 32 bits")
    if not 0 <= word < _WORD_LIMIT:
        raise ValueError(f"word {word} does not fit in 64 bits")
    tag = FINAL_TAG if final else BOOT_TAG
    return tag + sequence.to_bytes(4, "big") + word.to_bytes(WORD_SIZE, "little")


def led_command(on: bool) -> bytes:
    """Return the 16-byte LED command, the text padded with NUL bytes."""
    text = LED_ON_TEXT if on else LED_OFF_TEXT
    return text.ljust(FRAME_SIZE, b"\0")


class FirmwareReader:
    """Turn a binary firmware image into a sequence of boot frames.

    The image is read as big-endian 64-bit words. Each full word becomes a
    ``boot`` frame; a short trailing chunk is sent as a zero word. Once the
    image is exhausted a single ``coot`` frame carrying zero closes the
    transfer, after which no more frames are produced.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.sequence = 0
        self.finished = False

    def next_frame(self) -> bytes | None:
        """Return the next frame, or None once the final frame has been sent."""
        if self.finished:
            return None
        chunk = self._stream.read(WORD_SIZE)
        final = not chunk
        word = int.from_bytes(chunk, "big") if len(chunk) == WORD_SIZE else 0
        frame = encode_boot_frame(self.sequence, word, final)
        log.debug("frame %d word %#x: %s", self.sequence, word, frame.hex())
        self.sequence = (self.sequence + 1) % _SEQUENCE_LIMIT
        self.finished = final
        return frame

    def __iter__(self) -> Iterator[bytes]:
        while (frame := self.next_frame()) is not None:
            yield frame