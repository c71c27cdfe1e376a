import socket

import pytest

from sqlprobe import create_app

SQLSERVER_ENV = (
    "SQLSERVER_HOST",
    "SQLSERVER_PORT",
    "SQLSERVER_USER",
    "SQLSERVER_PASSWORD",
    "SQLSERVER_DB",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SQLSERVER_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app():
    return create_app({"TESTING": True, "TRUST_SERVER_CERT": "yes"})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def listening_port():
    """A loopback port that accepts TCP connections."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.bind(("127.0.0.1", 0))
        server.listen(8)
        yield server.getsockname()[1]


@pytest.fixture
def refused_port():
    """A loopback port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return port
