import logging
import sqlite3
from datetime import date

from database.db_manager import DatabaseManager
from database.errors import InsertError, QueryError
from models.transaction import MoneyTransaction, NewMoneyTransaction
from utils.date_helpers import day_span, format_storage_datetime, parse_storage_datetime

logger = logging.getLogger(__name__)


class TransactionDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> MoneyTransaction:
        return MoneyTransaction(
            id=row["id"],
            bank_account=row["bank_account"],
            transaction_category=row["transaction_category"],
            description=row["description"],
            amount=row["amount"],
            transaction_date=parse_storage_datetime(row["transaction_date"]),
            is_expense=bool(row["is_expense"]),
        )

    def get_all(self) -> list[MoneyTransaction]:
        conn = self._db.get_connection()
        try:
            rows = conn.execute(
                """SELECT id, bank_account, transaction_category, description,
                          amount, transaction_date, is_expense
                   FROM money_transaction
                   ORDER BY id ASC"""
            ).fetchall()
            return [self._row_to_model(r) for r in rows]
        except (sqlite3.Error, ValueError) as e:
            raise QueryError(str(e)) from e

    def create(self, new_tx: NewMoneyTransaction) -> int:
        conn = self._db.get_connection()
        try:
            cursor = conn.execute(
                """INSERT INTO money_transaction
                   (bank_account, transaction_category, description, amount,
                    transaction_date, is_expense)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    new_tx.bank_account,
                    new_tx.transaction_category,
                    new_tx.description,
                    new_tx.amount,
                    format_storage_datetime(new_tx.transaction_date),
                    bool(new_tx.is_expense),
                ),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise InsertError(str(e)) from e
        logger.debug(
            "Inserted transaction %d (account=%d, category=%d)",
            cursor.lastrowid, new_tx.bank_account, new_tx.transaction_category,
        )
        return cursor.lastrowid

    def sum_amount_by_category(self, category_id: int, start: date, end: date) -> float:
        """SUM(amount) for one category over whole days start..end, 0.0 if no rows."""
        range_start, range_end = day_span(start, end)
        conn = self._db.get_connection()
        try:
            row = conn.execute(
                """SELECT SUM(amount) AS total
                   FROM money_transaction
                   WHERE transaction_category = ?
                     AND transaction_date BETWEEN ? AND ?""",
                (
                    category_id,
                    format_storage_datetime(range_start),
                    format_storage_datetime(range_end),
                ),
            ).fetchone()
        except sqlite3.Error as e:
            raise QueryError(str(e)) from e
        return row["total"] or 0.0
