# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any app imports
# - In-process app and TestClient fixtures
# - Ports and a live server process for lifecycle tests
# =============================================================================

import os
import socket

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.pop("LISTEN_ADDR", None)

import pytest
from fastapi.testclient import TestClient

from tests.server_process import (
    LOCALHOST,
    start_server_process,
    stop_server_process,
    wait_until_ready,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def app():
    """Fresh application instance per test."""
    from app.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    """TestClient with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def free_port() -> int:
    """A port nothing is listening on right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((LOCALHOST, 0))
        return sock.getsockname()[1]


@pytest.fixture
def occupied_port():
    """A port held by a live listener for the duration of the test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind((LOCALHOST, 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


@pytest.fixture
def live_server(free_port):
    """Running server process; yields (process, base_url) and stops it afterwards."""
    proc = start_server_process(free_port)
    try:
        wait_until_ready(proc, free_port)
        yield proc, f"http://{LOCALHOST}:{free_port}"
    finally:
        stop_server_process(proc)
