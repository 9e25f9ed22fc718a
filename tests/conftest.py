"""
Shared fixtures. The backend is never contacted: BackendClient.post_json is
replaced with a mock that tests program with ApiResponse values.
"""
from unittest.mock import MagicMock, patch

import pytest

from api.client import ApiResponse, BackendClient
from households.service import HouseholdService
from i18n.translator import Translator


@pytest.fixture
def backend():
    client = MagicMock(spec=BackendClient)
    client.post_json.return_value = ApiResponse(200, {})
    return client


@pytest.fixture
def translator():
    return Translator()


@pytest.fixture
def service():
    svc = MagicMock(spec=HouseholdService)
    svc.submit.return_value = {"id": "01HZX"}
    return svc


@pytest.fixture
def portal():
    import app as portal_app

    portal_app.SESSION_CONTEXTS.clear()
    portal_app.app.config["TESTING"] = True
    with patch.object(portal_app.backend, "post_json") as post_json:
        post_json.return_value = ApiResponse(200, {})
        yield portal_app, post_json
    portal_app.SESSION_CONTEXTS.clear()


@pytest.fixture
def client(portal):
    portal_app, _ = portal
    return portal_app.app.test_client()


@pytest.fixture
def post_json(portal):
    _, mock = portal
    return mock
