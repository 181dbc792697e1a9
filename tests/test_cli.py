import io
from unittest.mock import patch

from uartboot.cli import main
from uartboot.frames import FirmwareReader, encode_boot_frame, led_command


class FakePort:
    def __init__(self, available=0):
        self.in_waiting = available
        self.written = []
        self.closed = False

    def write(self, data):
        self.written.append(bytes(data))
        return len(data)

    def read(self, size):
        return b"\x00" * size

    def close(self):
        self.closed = True


def _firmware(tmp_path, data):
    path = tmp_path / "firmware.bin"
    path.write_bytes(data)
    return path


def test_led_and_send_commands(tmp_path, monkeypatch, capsys):
    data = (0x0102030405060708).to_bytes(8, "big")
    path = _firmware(tmp_path, data)
    port = FakePort()
    monkeypatch.setattr("sys.stdin", io.StringIO("on\noff\nsend\nquit\non\n"))
    with patch("serial.Serial", return_value=port) as serial_cls:
        code = main([str(path), "--port", "COM11"])
    assert code == 0
    assert serial_cls.call_args.kwargs["port"] == "COM11"
    assert serial_cls.call_args.kwargs["baudrate"] == 115200
    first = encode_boot_frame(0, 0x0102030405060708, False)
    assert port.written == [led_command(True), led_command(False), first]
    assert first.hex() in capsys.readouterr().out
    assert port.closed


def test_run_sends_whole_image(tmp_path, monkeypatch):
    data = bytes(range(24))
    path = _firmware(tmp_path, data)
    port = FakePort(available=16)
    monkeypatch.setattr("sys.stdin", io.StringIO("run\n"))
    with patch("serial.Serial", return_value=port):
        code = main([str(path)])
    assert code == 0
    assert port.written == list(FirmwareReader(io.BytesIO(data)))
    assert port.written[-1][:4] == b"coot"


def test_unknown_command_reported(tmp_path, monkeypatch, capsys):
    path = _firmware(tmp_path, b"")
    port = FakePort()
    monkeypatch.setattr("sys.stdin", io.StringIO("blink\n"))
    with patch("serial.Serial", return_value=port):
        code = main([str(path)])
    assert code == 0
    assert port.written == []
    assert "blink" in capsys.readouterr().err


def test_missing_firmware_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with patch("serial.Serial") as serial_cls:
        code = main([str(tmp_path / "absent.bin")])
    assert code == 1
    serial_cls.assert_not_called()
    assert "absent.bin" in capsys.readouterr().err