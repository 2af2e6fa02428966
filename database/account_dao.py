import logging
import sqlite3

from database.db_manager import DatabaseManager
from database.errors import InsertError, QueryError
from models.account import Account, NewAccount

logger = logging.getLogger(__name__)


class AccountDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Account:
        return Account(
            id=row["id"],
            name=row["name"],
            account_type=row["account_type"],
            initial_balance=row["initial_balance"],
        )

    def get_all(self) -> list[Account]:
        conn = self._db.get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, account_type, initial_balance FROM account ORDER BY id"
            ).fetchall()
        except sqlite3.Error as e:
            raise QueryError(str(e)) from e
        return [self._row_to_model(r) for r in rows]

    def create(self, new_account: NewAccount) -> int:
        conn = self._db.get_connection()
        try:
            cursor = conn.execute(
                "INSERT INTO account(name, account_type, initial_balance) VALUES (?, ?, ?)",
                (new_account.name, new_account.account_type, new_account.initial_balance),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise InsertError(str(e)) from e
        logger.debug("Inserted account %d (%s)", cursor.lastrowid, new_account.name)
        return cursor.lastrowid
