"""The store: sole gateway between the application and the SQLite database.

One instance is created at startup and handed to whoever needs it. Every
public method holds the store's lock for its whole duration, so operations
against the single connection never interleave.
"""
import logging
import sqlite3
import threading
from datetime import date

from database.account_dao import AccountDAO
from database.category_dao import CategoryDAO
from database.currency_dao import CurrencyDAO
from database.db_manager import DatabaseManager
from database.errors import InsertError, QueryError
from database.transaction_dao import TransactionDAO
from models.account import Account, NewAccount
from models.category import Category, NewCategory
from models.currency import Currency
from models.transaction import MoneyTransaction, NewMoneyTransaction
from utils.app_config import get_database_url
from utils.constants import DATABASE_URL_ENV

logger = logging.getLogger(__name__)


class Store:
    def __init__(self, database_url: str | None = None):
        """Open the database or terminate the process.

        database_url defaults to the DATABASE_URL environment value. There is
        no degraded mode without storage: a missing URL or a failed open
        raises SystemExit.
        """
        url = database_url or get_database_url()
        if not url:
            logger.critical("%s must be set", DATABASE_URL_ENV)
            raise SystemExit(f"{DATABASE_URL_ENV} must be set")

        self._lock = threading.Lock()
        self._closed = False
        self._db = DatabaseManager(url)
        try:
            self._db.initialize()
        except sqlite3.Error as e:
            logger.critical("Error connecting to %s: %s", url, e)
            self._db.close()
            raise SystemExit(f"Error connecting to {url}") from e

        self._accounts = AccountDAO(self._db)
        self._categories = CategoryDAO(self._db)
        self._transactions = TransactionDAO(self._db)
        self._currencies = CurrencyDAO(self._db)
        logger.info("Store ready (%s)", url)

    # ── Accounts ─────────────────────────────────────────────────────────────
    def create_account(self, new_account: NewAccount) -> None:
        with self._lock:
            self._ensure_open(InsertError)
            self._accounts.create(new_account)

    def get_accounts(self) -> list[Account]:
        with self._lock:
            self._ensure_open(QueryError)
            return self._accounts.get_all()

    # ── Categories ───────────────────────────────────────────────────────────
    def create_category(self, new_category: NewCategory) -> None:
        with self._lock:
            self._ensure_open(InsertError)
            self._categories.create(new_category)

    def get_categories(self) -> list[Category]:
        with self._lock:
            self._ensure_open(QueryError)
            return self._categories.get_all()

    # ── Transactions ─────────────────────────────────────────────────────────
    def create_money_transaction(self, new_transaction: NewMoneyTransaction) -> None:
        with self._lock:
            self._ensure_open(InsertError)
            self._transactions.create(new_transaction)

    def get_money_transactions(self) -> list[MoneyTransaction]:
        with self._lock:
            self._ensure_open(QueryError)
            return self._transactions.get_all()

    def calculate_expense_by_category(
        self, category_id: int, start_date: date, end_date: date
    ) -> float:
        """Sum of amount for category_id dated start_date 00:00:00 .. end_date 23:59:59."""
        with self._lock:
            self._ensure_open(QueryError)
            return self._transactions.sum_amount_by_category(
                category_id, start_date, end_date
            )

    # ── Currencies ───────────────────────────────────────────────────────────
    def get_currencies(self) -> list[Currency]:
        with self._lock:
            self._ensure_open(QueryError)
            return self._currencies.get_all()

    def get_currency_symbol_by_id(self, currency_id: int) -> str:
        with self._lock:
            self._ensure_open(QueryError)
            return self._currencies.get_symbol_by_id(currency_id)

    # ── Lifecycle ────────────────────────────────────────────────────────────
    def close(self):
        with self._lock:
            if not self._closed:
                self._db.close()
                self._closed = True
                logger.info("Store closed")

    def _ensure_open(self, error_cls):
        if self._closed:
            raise error_cls("store is closed")
