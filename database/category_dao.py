import logging
import sqlite3

from database.db_manager import DatabaseManager
from database.errors import InsertError, QueryError
from models.category import Category, NewCategory

logger = logging.getLogger(__name__)


class CategoryDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Category:
        return Category(
            id=row["id"],
            name=row["name"],
            is_income=bool(row["is_income"]),
        )

    def get_all(self) -> list[Category]:
        conn = self._db.get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, is_income FROM category ORDER BY id"
            ).fetchall()
        except sqlite3.Error as e:
            raise QueryError(str(e)) from e
        categories = [self._row_to_model(r) for r in rows]
        logger.debug("Loaded %d categories", len(categories))
        return categories

    def create(self, new_category: NewCategory) -> int:
        conn = self._db.get_connection()
        try:
            cursor = conn.execute(
                "INSERT INTO category(name, is_income) VALUES (?, ?)",
                (new_category.name, bool(new_category.is_income)),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise InsertError(str(e)) from e
        logger.debug("Inserted category %d (%s)", cursor.lastrowid, new_category.name)
        return cursor.lastrowid
