"""Serial session that drives a firmware transfer and the LED commands."""

from __future__ import annotations

import logging
from typing import BinaryIO, Protocol

import serial

from uartboot.frames import FRAME_SIZE, FirmwareReader, led_command

log = logging.getLogger(__name__)


class _Port(Protocol):
    in_waiting: int

    def write(self, data: bytes) -> int | None: ...

    def read(self, size: int) -> bytes: ...


def open_serial(name: str, baudrate: int) -> serial.Serial:
    """Open a serial port at 8 data bits, no parity, one stop bit, no flow control."""
    return serial.Serial(
        port=name,
        baudrate=baudrate,
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        xonxoff=False,
        rtscts=False,
        timeout=0,
    )


class BootSession:
    """Send firmware frames over a port, one for each 16-byte reply."""

    def __init__(self, port: _Port, firmware: BinaryIO) -> None:
        self.port = port
        self.reader = FirmwareReader(firmware)

    def _write(self, data: bytes) -> None:
        self.port.write(data)
        log.debug("%d byte senddata", len(data))

    def led_on(self) -> None:
        """Send the LED-on command."""
        self._write(led_command(True))

    def led_off(self) -> None:
        """Send the LED-off command."""
        self._write(led_command(False))

    def send_next(self) -> bytes | None:
        """Send the next firmware frame; return it, or None when the transfer is over."""
        frame = self.reader.next_frame()
        if frame is not None:
            self._write(frame)
        return frame

    def on_ready_read(self) -> bytes | None:
        """Handle incoming data: a full 16-byte reply is consumed and answered with the next frame."""
        available = self.port.in_waiting
        if available != FRAME_SIZE:
            return None
        reply = self.port.read(available)
        log.debug("rcv data: %r", reply)
        self.send_next()
        return reply