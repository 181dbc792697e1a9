"""Send a firmware image to a microcontroller bootloader over a serial port in 16-byte frames."""

__version__ = "0.1.0"