"""Pytest configuration and shared fixtures."""

import socket
import threading

import pytest
from werkzeug.serving import make_server

from indexer.tf_index import index_folder, save_index

OPENGL_DOC = (
    '<?xml version="1.0"?>'
    '<section><heading>Textures</heading>'
    '<para>Bind the texture to the buffer before drawing. Texture units 2 and 16.</para>'
    '<!-- not indexed --></section>'
)
PEOPLE_DOC = '<people><person><name>John Doe</name><age>42</age></person></people>'
EMPTY_DOC = '<root/>'


class LiveServer:
    """Runs a WSGI app on an ephemeral localhost port in a background thread"""

    def __init__(self, wsgi_app):
        self.server = make_server("127.0.0.1", 0, wsgi_app)
        self.url = f"http://127.0.0.1:{self.server.server_port}"
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    def start(self):
        self.thread.start()

    def stop(self):
        self.server.shutdown()
        self.thread.join(timeout=5)
        self.server.server_close()


@pytest.fixture
def serve():
    """Start a WSGI app and return its base URL; stopped after the test."""
    servers = []

    def _serve(wsgi_app):
        server = LiveServer(wsgi_app)
        server.start()
        servers.append(server)
        return server.url

    yield _serve

    for server in servers:
        server.stop()


@pytest.fixture
def closed_port_url():
    """URL of a localhost port nothing listens on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}"


@pytest.fixture
def xml_corpus(tmp_path):
    """Folder of small XML documents plus a nested folder the indexer skips."""
    corpus = tmp_path / "docs"
    corpus.mkdir()
    (corpus / "opengl.xml").write_text(OPENGL_DOC, encoding="utf-8")
    (corpus / "people.xml").write_text(PEOPLE_DOC, encoding="utf-8")
    (corpus / "empty.xml").write_text(EMPTY_DOC, encoding="utf-8")
    (corpus / "nested").mkdir()
    (corpus / "nested" / "ignored.xml").write_text("<a>ignored</a>", encoding="utf-8")
    return corpus


@pytest.fixture
def index_file(tmp_path, xml_corpus):
    """Index of xml_corpus written to disk."""
    path = tmp_path / "index.json"
    save_index(index_folder(str(xml_corpus)), str(path))
    return path
