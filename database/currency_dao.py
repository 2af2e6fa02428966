import sqlite3

from database.db_manager import DatabaseManager
from database.errors import QueryError
from models.currency import Currency


class CurrencyDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Currency:
        return Currency(id=row["id"], name=row["name"], symbol=row["symbol"])

    def get_all(self) -> list[Currency]:
        conn = self._db.get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, symbol FROM currency ORDER BY id"
            ).fetchall()
        except sqlite3.Error as e:
            raise QueryError(str(e)) from e
        return [self._row_to_model(r) for r in rows]

    def get_symbol_by_id(self, currency_id: int) -> str:
        conn = self._db.get_connection()
        try:
            row = conn.execute(
                "SELECT symbol FROM currency WHERE id = ?", (currency_id,)
            ).fetchone()
        except sqlite3.Error as e:
            raise QueryError(str(e)) from e
        if row is None:
            raise QueryError(f"no currency with id {currency_id}")
        return row["symbol"]
