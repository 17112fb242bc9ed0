"""Small HTTP services: a request counter, a visit cookie and static pages."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
import time
from collections.abc import Sequence
from http.cookies import CookieError, SimpleCookie
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

WELCOME_MESSAGE = "Welcome to the Home Page!"
ABOUT_MESSAGE = "This repository contains Go(lang) examples."
FIRST_VISIT_MESSAGE = "Hello, you're here for the first time"
STOPPED_MESSAGE = "listener stopped"
COOKIE_NAME = "timestamp"

_log = logging.getLogger(__name__)


def request_message(path: str, query: str, number: int) -> str:
    """Body that answers a request for ``path`` with ``query`` as request ``number``."""
    url = f"{path}?{query}" if query else path
    return f"Hello World\nYou requested: {url}\nthis is request number {number}\n"


def visit_message(cookie: str | None) -> str:
    """Greeting for a visitor whose last-visit cookie holds ``cookie`` (Unix seconds)."""
    if cookie is None:
        return FIRST_VISIT_MESSAGE
    try:
        stamp = int(cookie)
    except ValueError:
        stamp = 0
    try:
        moment = time.localtime(stamp)
    except (OverflowError, OSError, ValueError):
        moment = time.localtime(0)
    return "Hi, your last visit was at " + time.strftime("%H:%M:%S", moment)


class _AppServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int]) -> None:
        super().__init__(address, _Handler)
        self._counter = 0
        self._lock = threading.Lock()

    def next_number(self) -> int:
        with self._lock:
            number = self._counter
            self._counter += 1
            return number


class _Handler(BaseHTTPRequestHandler):
    server: _AppServer

    def _reply(self, body: str, cookie: str | None = None) -> None:
        data = body.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        if cookie is not None:
            self.send_header("Set-Cookie", cookie)
        self.end_headers()
        self.wfile.write(data)

    def _visit_cookie(self) -> str | None:
        try:
            jar = SimpleCookie(self.headers.get("Cookie", ""))
        except CookieError:
            return None
        morsel = jar.get(COOKIE_NAME)
        return None if morsel is None else morsel.value

    def do_GET(self) -> None:  # noqa: N802
        parts = urlsplit(self.path)
        route = parts.path
        if route == "/about":
            self._reply(ABOUT_MESSAGE)
        elif route == "/home":
            self._reply(WELCOME_MESSAGE)
        elif route == "/visit":
            now = f"{COOKIE_NAME}={int(time.time())}"
            self._reply(visit_message(self._visit_cookie()), cookie=now)
        elif route == "/stop":
            self._reply(STOPPED_MESSAGE)
            threading.Thread(target=self.server.shutdown, daemon=True).start()
        else:
            number = self.server.next_number()
            self._reply(request_message(route, parts.query, number))
            _log.info("%s", route if not parts.query else f"{route}?{parts.query}")

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        _log.debug(format, *args)


def make_server(host: str = "", port: int = 8080) -> ThreadingHTTPServer:
    """An HTTP server on ``host``:``port``; call ``serve_forever`` to run it.

    Routes: ``/about``, ``/home``, ``/visit`` (last-visit cookie), ``/stop``
    (shuts the server down); every other path answers with a request counter.
    """
    return _AppServer((host, port))


def main(argv: Sequence[str] | None = None) -> int:
    """Serve until ``/stop`` is requested or the process is interrupted."""
    parser = argparse.ArgumentParser(prog="webapps")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    server = make_server(args.host, args.port)
    print(f"started listener on port {server.server_address[1]}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0