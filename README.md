# uartboot

`uartboot` sends a firmware image to a microcontroller bootloader over a
serial port, one 16-byte frame at a time. It can also send two fixed LED
commands.

## Frame format

Every frame is 16 bytes long:

| bytes  | content                                                    |
|--------|------------------------------------------------------------|
| 0–3    | `boot` for an ordinary frame, `coot` for the closing frame |
| 4–7    | frame sequence number, big-endian                          |
| 8–15   | 64-bit data word, least significant byte first             |

The firmware file is read in 8-byte chunks, each taken as a big-endian
word. So the eight bytes of a chunk go out on the wire in reverse order.
A short chunk at the end of the file is sent as a zero word. When the
file is used up, one `coot` frame carrying zero ends the transfer. After
that, no more frames are produced. Sequence numbers start at 0 and go up
by one for each frame.

The LED commands are `oledon` and `fledof`, each padded to 16 bytes with
NUL bytes.

## Installation

```
pip install .
```

To run the tests, install with the test extra:

```
pip install .[test]
pytest
```

## Command line

```
uartboot FIRMWARE [--port COM11] [--baudrate 115200] [--poll-interval 0.01]
```

The command opens the firmware file and the serial port. The port runs at
8 data bits, no parity, one stop bit and no flow control. The command
then reads commands from standard input, one per line:

| command        | effect                                                                 |
|----------------|------------------------------------------------------------------------|
| `on`           | send the LED-on command                                                |
| `off`          | send the LED-off command                                               |
| `send`         | send the next frame and print it in hex, or `transfer complete` once done |
| `run`          | send frames until the transfer ends, each after a 16-byte reply arrives |
| `quit`, `exit` | stop                                                                   |

With `run`, the first frame is sent straight away if no frame has been
sent yet. After that, the command checks the port every `--poll-interval`
seconds. Each time exactly 16 bytes are waiting, it reads them and sends
the next frame. An unknown command prints a message on standard error.
If the firmware file or the port cannot be opened, the command prints an
error and exits with status 1.

## Library use

```python
from uartboot.frames import FirmwareReader, encode_boot_frame, led_command
from uartboot.session import BootSession, open_serial

frame = encode_boot_frame(0, 0x0807060504030201, final=False)
assert frame == b"boot\x00\x00\x00\x00\x01\x02\x03\x04\x05\x06\x07\x08"
assert led_command(True) == b"oledon" + b"\0" * 10

with open("firmware.bin", "rb") as firmware:
    frames = list(FirmwareReader(firmware))   # ends with the coot frame

port = open_serial("COM11", 115200)
with open("firmware.bin", "rb") as firmware:
    session = BootSession(port, firmware)
    session.send_next()
    # call this whenever data may be waiting; it answers a 16-byte reply
    session.on_ready_read()
```

- `encode_boot_frame` raises `ValueError` when the sequence does not fit
  in 32 bits or the word does not fit in 64 bits.
- `FirmwareReader.next_frame()` returns `None` after the closing frame.
  Its `sequence` and `finished` attributes show how far the transfer has
  got.
- `BootSession` works with any object that has `in_waiting`, `write` and
  `read`.
- `BootSession.on_ready_read()` does nothing and returns `None` unless
  exactly 16 bytes are waiting. Otherwise it reads them, sends the next
  frame, and returns the reply.
- `open_serial` opens the port with a zero read timeout.

`uartboot.datafile` holds helpers for files of big-endian words:

- `WordLog(path).append(value)` writes a 32-bit word at the current
  position and returns the new position. Each append reopens the file for
  writing, which clears it, so earlier positions read back as zeros.
- `read_words(path)` reads a file as 32-bit words. A short tail reads as
  zero.
- `read_bytes_at(path, offsets)` returns the byte at each offset. It
  raises `IndexError` for an offset past the end of the file.

## What it does not do

- There is no graphical window. Everything runs from the command line or
  from Python.
- The transfer does not look at what the device's replies contain.
- The transfer has no timeout and no retry. `run` waits until the device
  answers every frame.