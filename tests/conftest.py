import threading

import pytest

from devops_hello.server import create_server


class BackgroundServer:
    """Hello server on an ephemeral port, served from a daemon thread."""

    def __init__(self, host='127.0.0.1', port=0, server_factory=create_server):
        self.host = host
        self.port = port
        self.server_factory = server_factory
        self.server = None

    @property
    def url(self):
        return f"http://{self.host}:{self.port}"

    def start(self):
        self.server = self.server_factory(self.host, self.port)
        self.port = self.server.server_address[1]
        thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        thread.start()

    def stop(self):
        if self.server:
            self.server.shutdown()
            self.server.server_close()


@pytest.fixture
def hello_server():
    server = BackgroundServer()
    server.start()
    yield server
    server.stop()
