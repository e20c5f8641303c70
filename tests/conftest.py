import pytest
from fastapi.testclient import TestClient

from hello_crm.config import Settings
from hello_crm.main import app
from hello_crm.server import create_server

from .helpers import serve_in_thread, stop


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def live_server():
    """A real uvicorn listener on an ephemeral localhost port."""
    server = create_server(Settings(host="127.0.0.1", port=0, log_level="warning"))
    thread = serve_in_thread(server)
    yield server
    stop(server, thread)


@pytest.fixture
def base_url(live_server):
    return f"http://127.0.0.1:{live_server.bound_port}"
