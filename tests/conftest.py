"""Shared fixtures: every test works on a private copy of the winners file."""

import shutil

import pytest
from fastapi.testclient import TestClient

from world_cup_api.app.core.config import get_data_file_path
from world_cup_api.app.core.store import WinnersStore
from world_cup_api.app.main import create_app


@pytest.fixture
def data_file(tmp_path):
    """Copy of the bundled winners.json (21 winners, 1930-2018)."""
    target = tmp_path / "winners.json"
    shutil.copyfile(get_data_file_path("data/winners.json"), target)
    return target


@pytest.fixture
def store(data_file):
    store = WinnersStore(str(data_file))
    store.load()
    return store


@pytest.fixture
def client(data_file):
    app = create_app(store=WinnersStore(str(data_file)))
    # Entering the context runs the lifespan hook, which loads the store.
    with TestClient(app) as test_client:
        yield test_client
