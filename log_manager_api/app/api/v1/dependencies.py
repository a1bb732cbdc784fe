"""
Request-scoped service wiring.

FastAPI resolves ``get_db`` once per request, so every repository and
service built here shares one connection and one transaction.  Tests
override ``get_db`` or patch ``settings.database_url``.
"""

import sqlite3

from fastapi import Depends

from log_manager_api.app.core.db import get_db
from log_manager_api.app.repositories.log_repository import LogRepository
from log_manager_api.app.repositories.user_repository import UserRepository
from log_manager_api.app.services.log_service import LogService
from log_manager_api.app.services.user_service import UserService
from log_manager_api.app.services.user_validation_service import UserValidationService


def get_log_service(conn: sqlite3.Connection = Depends(get_db)) -> LogService:
    return LogService(LogRepository(conn), UserRepository(conn))


def get_user_service(
    conn: sqlite3.Connection = Depends(get_db),
    log_service: LogService = Depends(get_log_service),
) -> UserService:
    user_repository = UserRepository(conn)
    validation_service = UserValidationService(user_repository, log_service)
    return UserService(user_repository, log_service, validation_service)
