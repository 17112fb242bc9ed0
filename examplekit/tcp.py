"""A retrying TCP request client and a server that collects incoming messages."""

from __future__ import annotations

import logging
import socket
import socketserver
import threading
import time
from collections.abc import Callable
from types import TracebackType

RETRY_DELAY = 0.51
READ_SIZE = 65535
CONNECT_TIMEOUT = 10.0
DEFAULT_PORT = 2223
READ_DEADLINE = 5.0
_CHUNK = 4096

_log = logging.getLogger(__name__)


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"address must be host:port, got {address!r}")
    return host.strip("[]"), int(port)


def tcp_client(request: str, address: str, retries: int = 3) -> str:
    """Send ``request`` followed by a blank line and return the first reply chunk.

    A failed connection or write is retried ``retries`` times after a short
    pause; when connecting never succeeds the result is ``""``. A read error
    is returned as its message.
    """
    host, port = _split_address(address)
    payload = f"{request}\r\n\r\n".encode("utf-8")
    for attempt in range(retries + 1):
        try:
            conn = socket.create_connection((host, port), timeout=CONNECT_TIMEOUT)
        except OSError as exc:
            _log.warning("%s", exc)
            if attempt < retries:
                time.sleep(RETRY_DELAY)
                continue
            return ""
        with conn:
            try:
                conn.sendall(payload)
            except OSError as exc:
                _log.warning("%s", exc)
                if attempt < retries:
                    time.sleep(RETRY_DELAY)
                    continue
            try:
                data = conn.recv(READ_SIZE)
            except OSError as exc:
                return str(exc)
            return data.decode("utf-8", errors="replace")
    return ""


class _MessageHandler(socketserver.BaseRequestHandler):
    server: MessageServer

    def handle(self) -> None:
        _log.info("Connection from %s established.", self.client_address)
        deadline = time.monotonic() + READ_DEADLINE
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            self.request.settimeout(remaining)
            try:
                chunk = self.request.recv(_CHUNK)
            except OSError:
                break
            if not chunk:
                break
            self.server.deliver(chunk.decode("utf-8", errors="replace"))
        _log.info("Connection from %s closed.", self.client_address)


class MessageServer(socketserver.ThreadingTCPServer):
    """Accepts connections and hands each received chunk, numbered, to a sink."""

    daemon_threads = True
    allow_reuse_address = True

    def __init__(self, port: int, sink: Callable[[str], object]) -> None:
        super().__init__(("", port), _MessageHandler)
        self._sink = sink
        self._count = 0
        self._lock = threading.Lock()
        self._thread = threading.Thread(target=self.serve_forever, daemon=True)

    def deliver(self, text: str) -> None:
        with self._lock:
            self._count += 1
            self._sink(f"Data {self._count}: {text.strip()}")

    def start(self) -> None:
        self._thread.start()

    def close(self) -> None:
        """Stop accepting connections and release the port."""
        if self._thread.is_alive():
            self.shutdown()
            self._thread.join()
        self.server_close()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def serve_messages(port: int = DEFAULT_PORT, sink: Callable[[str], object] = print) -> MessageServer:
    """Start collecting messages on ``port`` in the background.

    Every chunk read from a client is trimmed and passed to ``sink`` as
    ``"Data N: text"``. Each connection may send for five seconds.
    Close the returned server when done.
    """
    server = MessageServer(port, sink)
    server.start()
    return server