"""Pytest configuration and fixtures."""

from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from city_info_api.app.core.data_store import CitiesDataStore
from city_info_api.app.main import app
from city_info_api.app.services.mail_service import MailService, get_mail_service


class RecordingMailService(MailService):
    """Mail service that keeps sent mails in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.sent: List[Tuple[str, str]] = []

    def send(self, subject: str, message: str) -> None:
        self.sent.append((subject, message))


@pytest.fixture(autouse=True)
def reset_data_store():
    """Restore the seeded cities before every test."""
    CitiesDataStore.current().reset()
    yield
    CitiesDataStore.current().reset()


@pytest.fixture
def mail_service():
    service = RecordingMailService()
    app.dependency_overrides[get_mail_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_mail_service, None)


@pytest.fixture
def client(mail_service):
    with TestClient(app) as test_client:
        yield test_client
