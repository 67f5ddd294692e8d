import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Every test runs against the test database."""


@pytest.fixture()
def api_client():
    """Unauthenticated DRF APIClient."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient force-authenticated as a plain registry user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="registry-user", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "registry-correlation-id"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
