import logging
import sqlite3

from utils.constants import DEFAULT_CURRENCIES

logger = logging.getLogger(__name__)

_SQLITE_URL_PREFIX = "sqlite://"


def resolve_database_url(url: str) -> tuple[str, bool]:
    """Map a connection string to (sqlite3.connect target, uri flag).

    Accepts plain paths, ':memory:', 'file:' URIs and SQLAlchemy-style
    'sqlite:///relative.db' / 'sqlite:////abs/path.db' URLs.
    """
    url = url.strip()
    if url.startswith("file:"):
        return url, True
    if url.startswith(_SQLITE_URL_PREFIX):
        path = url[len(_SQLITE_URL_PREFIX):]
        if path.startswith("/"):
            path = path[1:]
        return path or ":memory:", False
    return url, False


class DatabaseManager:
    def __init__(self, database_url: str):
        self.database_url = database_url
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            target, uri = resolve_database_url(self.database_url)
            # Access is serialised by Store's lock, not by thread affinity
            self._conn = sqlite3.connect(target, uri=uri, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
            logger.debug("Opened SQLite database %s", target)
        return self._conn

    def initialize(self):
        """Open the connection, create schema and seed defaults."""
        conn = self.get_connection()
        self._create_schema(conn)
        self._seed_defaults(conn)
        conn.commit()

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS account (
                id              INTEGER PRIMARY KEY AUTOINCREMENT,
                name            TEXT    NOT NULL,
                account_type    TEXT    NOT NULL,
                initial_balance REAL    NOT NULL
            );

            CREATE TABLE IF NOT EXISTS category (
                id        INTEGER PRIMARY KEY AUTOINCREMENT,
                name      TEXT    NOT NULL,
                is_income BOOLEAN NOT NULL
            );

            CREATE TABLE IF NOT EXISTS money_transaction (
                id                   INTEGER  PRIMARY KEY AUTOINCREMENT,
                bank_account         INTEGER  NOT NULL REFERENCES account(id),
                transaction_category INTEGER  NOT NULL REFERENCES category(id),
                description          TEXT     NOT NULL,
                amount               REAL     NOT NULL,
                transaction_date     DATETIME NOT NULL,
                is_expense           BOOLEAN  NOT NULL
            );

            CREATE TABLE IF NOT EXISTS currency (
                id     INTEGER PRIMARY KEY AUTOINCREMENT,
                name   TEXT    NOT NULL,
                symbol TEXT    NOT NULL
            );
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        count = conn.execute("SELECT COUNT(*) FROM currency").fetchone()[0]
        if count:
            return
        conn.executemany(
            "INSERT INTO currency(name, symbol) VALUES (?, ?)",
            [(c["name"], c["symbol"]) for c in DEFAULT_CURRENCIES],
        )
        logger.info("Seeded %d default currencies", len(DEFAULT_CURRENCIES))

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
