"""
Persistence gateway for audit log entries.

All queries use parameterized statements.  Filters for ``find_all``
are combined with AND; date bounds apply to the ISO ``timestamp``
column, which sorts lexicographically in chronological order.
"""

import sqlite3
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple

from ..schemas.log import Log

_COLUMNS = "id, message, severity, timestamp, user_name"


class LogRepository:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def save(
        self,
        message: str,
        severity: str,
        timestamp: datetime,
        user_name: Optional[str],
    ) -> Log:
        cursor = self.conn.execute(
            "INSERT INTO logs (message, severity, timestamp, user_name) VALUES (?, ?, ?, ?)",
            (message, severity, timestamp.isoformat(timespec="seconds"), user_name),
        )
        return Log(
            id=cursor.lastrowid,
            message=message,
            severity=severity,
            timestamp=timestamp.replace(microsecond=0),
            user=user_name,
        )

    def find_all(
        self,
        severity: Optional[str] = None,
        user_name: Optional[str] = None,
        message: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Log]:
        where, params = self._where(severity, user_name, message, start, end)
        query = f"SELECT {_COLUMNS} FROM logs{where} ORDER BY timestamp ASC, id ASC LIMIT ? OFFSET ?"
        params.extend([limit, offset])
        rows = self.conn.execute(query, tuple(params)).fetchall()
        return [self._row_to_log(row) for row in rows]

    def find_ids(
        self,
        severity: Optional[str] = None,
        user_name: Optional[str] = None,
        message: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> List[int]:
        """IDs of every entry matching the ``find_all`` filters, unpaginated."""
        where, params = self._where(severity, user_name, message, start, end)
        rows = self.conn.execute(f"SELECT id FROM logs{where} ORDER BY id", tuple(params)).fetchall()
        return [row["id"] for row in rows]

    def find_by_id(self, log_id: int) -> Optional[Log]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM logs WHERE id = ?", (log_id,)
        ).fetchone()
        return self._row_to_log(row) if row else None

    def exists_by_user_name(self, user_name: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM logs WHERE user_name = ? LIMIT 1", (user_name,)
        ).fetchone()
        return row is not None

    def find_user_names(self) -> List[Optional[str]]:
        """Return the user reference of every log, nulls included."""
        rows = self.conn.execute("SELECT user_name FROM logs ORDER BY id").fetchall()
        return [row["user_name"] for row in rows]

    def delete_by_ids(self, log_ids: Sequence[int]) -> None:
        self.conn.executemany("DELETE FROM logs WHERE id = ?", [(log_id,) for log_id in log_ids])

    @staticmethod
    def _row_to_log(row: sqlite3.Row) -> Log:
        return Log(
            id=row["id"],
            message=row["message"],
            severity=row["severity"],
            timestamp=row["timestamp"],
            user=row["user_name"],
        )

    @staticmethod
    def _where(
        severity: Optional[str],
        user_name: Optional[str],
        message: Optional[str],
        start: Optional[str],
        end: Optional[str],
    ) -> Tuple[str, List[Any]]:
        where_clauses: List[str] = []
        params: List[Any] = []
        if severity:
            where_clauses.append("severity = ?")
            params.append(severity)
        if user_name:
            where_clauses.append("user_name = ?")
            params.append(user_name)
        if message:
            # % and _ in the search text are literal characters
            escaped = message.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            where_clauses.append("message LIKE ? ESCAPE '\\'")
            params.append(f"%{escaped}%")
        if start:
            where_clauses.append("timestamp >= ?")
            params.append(start)
        if end:
            where_clauses.append("timestamp <= ?")
            params.append(end)
        if not where_clauses:
            return "", params
        return " WHERE " + " AND ".join(where_clauses), params
