import logging
import socket

import pytest

import beacon.app as app
from beacon.wire import encode


def test_handle_packet_reports_record() -> None:
    lines = []
    record = app.handle_packet(encode("a@b.com", 0, "1.1.1.1", 53), "10.0.0.1:6668", lines.append)
    assert record is not None and record.port == 53
    assert "Email: a@b.com" in lines[0]
    assert "From: 10.0.0.1:6668" in lines[0]


def test_handle_packet_reports_error(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    lines = []
    assert app.handle_packet(b"\x00" * 10, "10.0.0.1:6668", lines.append) is None
    assert "Error parsing message: packet too short" in lines[0]
    assert any("packet too short" in message for _, __, message in caplog.record_tuples)


def test_serve_handles_each_datagram_independently() -> None:
    lines = []
    datagrams = [
        (encode("a", 0, "b", 1), "h:1"),
        (b"\x01" * 12, "h:2"),
        (encode("c", 0, "d", 2), "h:3"),
    ]
    assert app.serve(datagrams, lines.append) == 3
    assert ["Email: a" in lines[0], "Error" in lines[1], "Email: c" in lines[2]] == [True] * 3


def test_main_exits_with_one_when_port_is_taken(qsettings) -> None:
    qsettings.setValue("listener/host", "127.0.0.1")
    lines = []
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as holder:
        holder.bind(("127.0.0.1", 0))
        port = holder.getsockname()[1]
        assert app.main(["--port", str(port)], qsettings=qsettings, sink=lines.append) == 1
    assert f"Listening on port: {port}" in lines


def test_main_returns_zero_on_interrupt(monkeypatch, qsettings) -> None:
    seen = {}

    def fake_listen(port, host, buffer_size):
        seen.update(port=port, host=host, buffer_size=buffer_size)
        raise KeyboardInterrupt
        yield  # pragma: no cover

    monkeypatch.setattr(app, "listen", fake_listen)
    qsettings.setValue("listener/port", 7001)
    assert app.main([], qsettings=qsettings, sink=lambda _line: None) == 0
    assert seen == {"port": 7001, "host": "0.0.0.0", "buffer_size": 1024}


def test_cli_port_overrides_settings(qsettings) -> None:
    qsettings.setValue("listener/port", 7001)
    parser = app.build_parser(app.load_settings(qsettings))
    assert parser.parse_args([]).port == 7001
    assert parser.parse_args(["--port", "9999"]).port == 9999


@pytest.mark.parametrize("port", ["70000", "-1"])
def test_main_exits_with_one_for_port_out_of_range(
    qsettings, caplog: pytest.LogCaptureFixture, port: str
) -> None:
    caplog.set_level(logging.ERROR)
    assert app.main(["--port", port], qsettings=qsettings, sink=lambda _line: None) == 1
    assert any(
        "Error creating UDP listener" in message for _, __, message in caplog.record_tuples
    )
