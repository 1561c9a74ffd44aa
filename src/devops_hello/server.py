#!/usr/bin/env python3
"""
Hello HTTP Server

Answers every request, whatever the method or path, with a fixed message.
"""
from http.server import ThreadingHTTPServer, BaseHTTPRequestHandler
import logging
import sys

HOST = '0.0.0.0'
PORT = 8081
MESSAGE = "Hello from DevOps stack!"

LOGGER = logging.getLogger(__name__)

_READ_CHUNK = 64 * 1024


def render_body():
    """Return the response body: the message and a trailing newline."""
    return (MESSAGE + "\n").encode("utf-8")


class HelloHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def handle(self):
        try:
            super().handle()
        except (BrokenPipeError, ConnectionResetError):
            self.close_connection = True

    def do_HEAD(self):
        self._respond(include_body=False)

    def __getattr__(self, name):
        # Every other method, including non-standard ones, gets the same reply.
        if name.startswith('do_'):
            return self._respond
        raise AttributeError(name)

    def _respond(self, include_body=True):
        """Discard the request body and write the fixed reply."""
        try:
            self._drain_body()
            body = render_body()
            self.send_response(200)
            self.send_header('Content-Type', 'text/plain; charset=utf-8')
            self.send_header('Content-Length', str(len(body)))
            self.end_headers()
            if include_body:
                self.wfile.write(body)
        except (BrokenPipeError, ConnectionResetError):
            # Client went away; nothing to report.
            self.close_connection = True

    def _drain_body(self):
        """Read and drop whatever body the client announced."""
        if self.headers.get('Transfer-Encoding'):
            # Chunked bodies are not parsed, so the connection can't be reused.
            self.close_connection = True
            return

        try:
            remaining = int(self.headers.get('Content-Length', 0))
        except ValueError:
            self.close_connection = True
            return

        while remaining > 0:
            chunk = self.rfile.read(min(remaining, _READ_CHUNK))
            if not chunk:
                self.close_connection = True
                break
            remaining -= len(chunk)

    def log_message(self, format, *args):
        return  # no access log


def create_server(host=HOST, port=PORT):
    """Bind the listener. Raises OSError if the address is unavailable."""
    return ThreadingHTTPServer((host, port), HelloHandler)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )

    LOGGER.info("Listening on :%d", PORT)
    try:
        server = create_server(HOST, PORT)
    except OSError as e:
        LOGGER.critical("listen tcp :%d: %s", PORT, e)
        sys.exit(1)

    with server:
        server.serve_forever()


if __name__ == '__main__':
    main()
