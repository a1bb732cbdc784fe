"""
Persistence gateway for users.

Wraps the ``users`` table behind lookup, save and delete methods.  The
repository never commits: it works on the connection of the current
request and the surrounding ``transaction`` decides the outcome.
"""

import sqlite3
from typing import List, Optional

from ..schemas.user import User

_COLUMNS = "id, name, birthdate, weight, height, favourite_color, bmi"


class UserRepository:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def find_all(self) -> List[User]:
        rows = self.conn.execute(f"SELECT {_COLUMNS} FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    def find_by_id(self, user_id: int) -> Optional[User]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM users WHERE id = ?", (user_id,)
        ).fetchone()
        return self._row_to_user(row) if row else None

    def find_user_by_name(self, name: Optional[str]) -> Optional[User]:
        if name is None:
            return None
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM users WHERE name = ?", (name,)
        ).fetchone()
        return self._row_to_user(row) if row else None

    def save(self, user: User) -> User:
        """Insert ``user`` and return it with the assigned id."""
        cursor = self.conn.execute(
            "INSERT INTO users (name, birthdate, weight, height, favourite_color, bmi) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (
                user.name,
                user.birthdate.isoformat(),
                user.weight,
                user.height,
                user.favourite_color,
                user.bmi,
            ),
        )
        return user.model_copy(update={"id": cursor.lastrowid})

    def delete_by_id(self, user_id: int) -> None:
        self.conn.execute("DELETE FROM users WHERE id = ?", (user_id,))

    def delete_all(self) -> None:
        self.conn.execute("DELETE FROM users")

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            birthdate=row["birthdate"],
            weight=row["weight"],
            height=row["height"],
            favourite_color=row["favourite_color"],
            bmi=row["bmi"],
        )
