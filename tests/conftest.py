from unittest.mock import MagicMock

import pytest
import requests

from greenchat.api_client import BackendClient


def build_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


@pytest.fixture
def fake_response():
    return build_response


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(http):
    return BackendClient(base_url="https://backend.test", secondary_url="", session=http)


@pytest.fixture
def mirrored_client(http):
    return BackendClient(base_url="https://backend.test", secondary_url="http://localhost:3001", session=http)
