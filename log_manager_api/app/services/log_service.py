"""
Log service for recording and querying audit entries.

Every user mutation ends with a call to ``add_log``.  The service also
backs the log endpoints (create, list with filters, find, delete by
ids or by filter) and answers the referential question the user
guards ask: does any log point at this user?
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional, Sequence

from ..core.errors import IllegalSeverity, LogNotFound, ParameterMissing
from ..core.messages import ErrorMessages, InfoMessages
from ..repositories.log_repository import LogRepository
from ..repositories.user_repository import UserRepository
from ..schemas.log import Log, LogRequest, Severity
from ..schemas.user import User

logger = logging.getLogger(__name__)


class LogService:
    """Service class for writing and retrieving audit logs."""

    def __init__(self, log_repository: LogRepository, user_repository: UserRepository):
        self.log_repository = log_repository
        self.user_repository = user_repository

    async def add_log(self, message: str, severity: str, actor_name: Optional[str]) -> Log:
        """Insert a new audit record stamped with the current time.

        Parameters
        ----------
        message : str
            Text of the entry.
        severity : str
            One of the ``Severity`` values.
        actor_name : Optional[str]
            Name of the acting user.  The entry references that user
            only if it exists at write time; otherwise the reference is
            left empty.
        """
        actor = self.user_repository.find_user_by_name(actor_name)
        log = self.log_repository.save(
            message=message,
            severity=severity,
            timestamp=datetime.now(),
            user_name=actor.name if actor else None,
        )
        logger.info("Log %s was saved as %s", log.id, severity)
        return log

    async def create_log(self, request: LogRequest) -> Log:
        """Validate an API create request and store the entry."""
        if not request.message or not request.message.strip():
            raise ParameterMissing(ErrorMessages.LOG_MESSAGE_MISSING)
        severity = (request.severity or Severity.INFO.value).upper()
        if severity not in Severity.choices():
            raise IllegalSeverity(Severity.choices())
        return await self.add_log(request.message, severity, request.user)

    async def list_logs(
        self,
        severity: Optional[str] = None,
        user: Optional[str] = None,
        message: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Log]:
        """Retrieve log entries with optional filters and pagination.

        Date bounds are inclusive whole days.  ``message`` matches as a
        literal substring.  Results are ordered oldest first.
        """
        return self.log_repository.find_all(
            **self._filters(severity, user, message, start_date, end_date),
            limit=limit,
            offset=offset,
        )

    async def find_log_by_id(self, log_id: int) -> Log:
        log = self.log_repository.find_by_id(log_id)
        if log is None:
            raise LogNotFound(log_id)
        return log

    async def delete_logs(self, log_ids: Sequence[int]) -> str:
        """Delete the given entries; all of them must exist."""
        for log_id in log_ids:
            if self.log_repository.find_by_id(log_id) is None:
                raise LogNotFound(log_id)
        self.log_repository.delete_by_ids(log_ids)
        result = InfoMessages.ENTRIES_DELETED.format(", ".join(str(i) for i in log_ids))
        logger.info(result)
        return result

    async def delete_logs_by_filter(
        self,
        severity: Optional[str] = None,
        user: Optional[str] = None,
        message: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> str:
        """Delete every entry matching the ``list_logs`` filters.

        At least one filter is required.
        """
        if not any((severity, user, message, start_date, end_date)):
            raise ParameterMissing(ErrorMessages.LOG_FILTER_MISSING)
        log_ids = self.log_repository.find_ids(**self._filters(severity, user, message, start_date, end_date))
        if not log_ids:
            return InfoMessages.NO_ENTRIES_DELETED
        return await self.delete_logs(log_ids)

    @staticmethod
    def _filters(
        severity: Optional[str],
        user: Optional[str],
        message: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> dict:
        return {
            "severity": severity.upper() if severity else None,
            "user_name": user,
            "message": message,
            "start": f"{start_date.isoformat()}T00:00:00" if start_date else None,
            "end": f"{end_date.isoformat()}T23:59:59" if end_date else None,
        }

    async def exist_log_by_user(self, user: User) -> bool:
        return self.log_repository.exists_by_user_name(user.name)

    async def find_referenced_user_names(self) -> List[Optional[str]]:
        return self.log_repository.find_user_names()
