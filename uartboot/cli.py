"""Command-line front end for the UART boot loader."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from pathlib import Path

import serial

from uartboot.session import BootSession, open_serial

_HELP = "commands: on, off, send, run, quit"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uartboot",
        description="Send LED commands and firmware frames over a serial port.",
        epilog=_HELP,
    )
    parser.add_argument("firmware", type=Path, help="binary firmware image")
    parser.add_argument("--port", default="COM11", help="serial port name")
    parser.add_argument("--baudrate", type=int, default=115200)
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=0.01,
        help="seconds to wait between checks for a reply",
    )
    return parser


def _run(session: BootSession, interval: float) -> None:
    if session.reader.sequence == 0 and not session.reader.finished:
        session.send_next()
    while not session.reader.finished:
        if session.on_ready_read() is None:
            time.sleep(interval)


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input and drive the serial session."""
    args = _build_parser().parse_args(argv)
    try:
        firmware = args.firmware.open("rb")
    except OSError as exc:
        print(f"uartboot: cannot open {args.firmware}: {exc}", file=sys.stderr)
        return 1

    with firmware:
        try:
            port = open_serial(args.port, args.baudrate)
        except serial.SerialException as exc:
            print(f"uartboot: cannot open {args.port}: {exc}", file=sys.stderr)
            return 1
        try:
            session = BootSession(port, firmware)
            for line in sys.stdin:
                command = line.strip().lower()
                if not command:
                    continue
                if command in ("quit", "exit"):
                    break
                if command == "on":
                    session.led_on()
                elif command == "off":
                    session.led_off()
                elif command == "send":
                    frame = session.send_next()
                    print(frame.hex() if frame is not None else "transfer complete")
                elif command == "run":
                    _run(session, args.poll_interval)
                    print("transfer complete")
                else:
                    print(f"unknown command {command!r}; {_HELP}", file=sys.stderr)
        finally:
            port.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())