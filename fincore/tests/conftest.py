from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from fincore.app import create_app
from fincore.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(log_json=False)


@pytest.fixture()
def app(settings: Settings) -> Flask:
    return create_app(settings)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
