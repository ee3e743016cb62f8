"""
Shared fixtures for Tick client tests.
"""
import pytest

from tick_api import TickClient
from tick_api.api.util import set_active_configuration
from tick_api.config import TickConfig

BASE_URL = "https://www.tickspot.com/acme/api/v2"


@pytest.fixture(autouse=True)
def no_active_configuration():
    """Every test starts and ends without an active configuration."""
    set_active_configuration(None)
    yield
    set_active_configuration(None)


@pytest.fixture
def acme_config():
    return TickConfig(subscription_id="acme", api_token="tok", user_agent="App/1.0")


@pytest.fixture
def tick_client():
    """Create a test Tick client."""
    return TickClient(
        {
            "subscription_id": "acme",
            "api_token": "tok",
            "user_agent": "App/1.0",
        }
    )


@pytest.fixture
def user_data():
    return {
        "id": 7,
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@acme.io",
        "timezone": "Eastern Time (US & Canada)",
        "updated_at": "2024-01-15T09:00:00.000-05:00",
    }


@pytest.fixture
def client_data():
    return {
        "id": 1,
        "name": "Acme",
        "archive": False,
        "url": f"{BASE_URL}/clients/1.json",
        "updated_at": "2024-01-15T09:00:00.000-05:00",
    }


@pytest.fixture
def project_data():
    return {
        "id": 16,
        "name": "Website Redesign",
        "budget": 120,
        "date_closed": None,
        "notifications": False,
        "billable": True,
        "recurring": False,
        "client_id": 1,
        "owner_id": 7,
        "url": f"{BASE_URL}/projects/16.json",
        "created_at": "2024-01-02T10:00:00.000-05:00",
        "updated_at": "2024-01-15T09:00:00.000-05:00",
    }


@pytest.fixture
def task_data():
    return {
        "id": "42",
        "name": "Design",
        "budget": 14.5,
        "position": 1,
        "project_id": 16,
        "date_closed": None,
        "billable": True,
        "url": f"{BASE_URL}/tasks/42.json",
        "created_at": "2024-01-02T10:00:00.000-05:00",
        "updated_at": "2024-01-15T09:00:00.000-05:00",
    }


@pytest.fixture
def entry_data():
    return {
        "id": "9001",
        "date": "2024-01-15",
        "hours": 1.5,
        "notes": "Wireframes",
        "task_id": 42,
        "user_id": 7,
        "url": f"{BASE_URL}/entries/9001.json",
        "created_at": "2024-01-15T09:00:00.000-05:00",
        "updated_at": "2024-01-15T09:00:00.000-05:00",
    }
