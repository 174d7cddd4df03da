"""Shared test fixtures.

client -- TestClient on a fresh app, so every test starts from an empty
schedule with the default wage.
"""
import pytest
from fastapi.testclient import TestClient

from sigeup.app import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
