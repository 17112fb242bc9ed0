import socket
import threading
import time

import pytest

from examplekit.tcp import serve_messages, tcp_client


def _reply_server():
    listener = socket.socket()
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)

    def run():
        conn, _ = listener.accept()
        with conn:
            data = b""
            while b"\r\n\r\n" not in data:
                chunk = conn.recv(1024)
                if not chunk:
                    break
                data += chunk
            conn.sendall(b"pong:" + data)
        listener.close()

    threading.Thread(target=run, daemon=True).start()
    return listener.getsockname()[1]


def _free_port():
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _wait_for(items, count):
    deadline = time.monotonic() + 5
    while len(items) < count and time.monotonic() < deadline:
        time.sleep(0.02)


def test_client_sends_request_with_blank_line():
    port = _reply_server()
    assert tcp_client("ping", f"127.0.0.1:{port}") == "pong:ping\r\n\r\n"


def test_client_returns_empty_when_unreachable():
    assert tcp_client("ping", f"127.0.0.1:{_free_port()}", 0) == ""


def test_client_rejects_bad_address():
    with pytest.raises(ValueError):
        tcp_client("ping", "nowhere")


def test_server_numbers_trimmed_messages():
    lines = []
    server = serve_messages(0, lines.append)
    try:
        port = server.server_address[1]
        for text in (b"  hello \r\n", b"world\n"):
            with socket.create_connection(("127.0.0.1", port)) as conn:
                conn.sendall(text)
            _wait_for(lines, len(lines) + 1)
    finally:
        server.close()
    assert lines == ["Data 1: hello", "Data 2: world"]