"""Shared fixtures for the Supernotes client tests."""

import json

import pytest
import requests

from supernotes.config import Config

BASE_URL = "http://127.0.0.1:1234/"


def _make_response(status: int = 200, body=None, url: str = BASE_URL) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = "utf-8"
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = b""
    return response


@pytest.fixture
def make_response():
    """Factory for canned requests.Response objects."""
    return _make_response


@pytest.fixture
def config() -> Config:
    return Config(base_url=BASE_URL, username="username", password="password", timeout=5)


@pytest.fixture
def token_body() -> dict:
    return {"access_token": "secret", "token_type": "bearer"}
