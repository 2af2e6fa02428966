from database.store import Store
from models.category import Category, NewCategory


class CategoryService:
    def __init__(self, store: Store):
        self._store = store

    def get_all(self) -> list[Category]:
        return self._store.get_categories()

    def get_expense_categories(self) -> list[Category]:
        return [c for c in self._store.get_categories() if not c.is_income]

    def create(self, name: str, is_income: bool = False) -> None:
        name = name.strip()
        if not name:
            raise ValueError("Category name cannot be empty.")
        self._store.create_category(NewCategory(name, bool(is_income)))
