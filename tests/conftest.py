from datetime import date
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from log_manager_api.app.core.config import settings
from log_manager_api.app.core.db import init_db, transaction
from log_manager_api.app.main import app
from log_manager_api.app.repositories.log_repository import LogRepository
from log_manager_api.app.repositories.user_repository import UserRepository
from log_manager_api.app.schemas.user import User
from log_manager_api.app.services import bmi_service
from log_manager_api.app.services.log_service import LogService
from log_manager_api.app.services.user_service import UserService
from log_manager_api.app.services.user_validation_service import UserValidationService


@pytest.fixture()
def database(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file for each test."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "log_manager_test.db"))
    init_db()
    yield tmp_path / "log_manager_test.db"


@pytest.fixture()
def client(database):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def conn(database):
    """One committed-on-exit connection, like a single request."""
    with transaction() as connection:
        yield connection


@pytest.fixture()
def services(conn):
    user_repository = UserRepository(conn)
    log_repository = LogRepository(conn)
    log_service = LogService(log_repository, user_repository)
    validation_service = UserValidationService(user_repository, log_service)
    return SimpleNamespace(
        conn=conn,
        users=user_repository,
        logs=log_repository,
        log_service=log_service,
        validation=validation_service,
        user_service=UserService(user_repository, log_service, validation_service),
    )


@pytest.fixture()
def user_factory(database):
    """Insert users straight into the store, without any audit log."""

    def _create_user(
        name: str,
        birthdate: date = date(1990, 1, 1),
        weight: float = 70.0,
        height: float = 1.8,
        favourite_color: str = "blue",
    ) -> User:
        with transaction() as connection:
            return UserRepository(connection).save(
                User(
                    name=name,
                    birthdate=birthdate,
                    weight=weight,
                    height=height,
                    favourite_color=favourite_color,
                    bmi=bmi_service.calculate(weight, height),
                )
            )

    return _create_user
