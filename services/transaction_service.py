import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime

from database.errors import DataStoreError
from database.store import Store
from models.account import Account
from models.category import Category
from models.transaction import MoneyTransaction, NewMoneyTransaction
from utils.app_config import get_currency_id
from utils.constants import DEFAULT_CURRENCY_SYMBOL, NOT_FOUND_LABEL
from utils.date_helpers import to_utc_naive, utc_now

logger = logging.getLogger(__name__)


@dataclass
class TransactionPage:
    """Everything the transactions view renders, loaded in one refresh."""
    transactions: list[MoneyTransaction] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    category_lookup: dict[int, Category] = field(default_factory=dict)
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL


def build_category_lookup(categories: list[Category]) -> dict[int, Category]:
    return {c.id: c for c in categories}


def category_label(lookup: dict[int, Category], category_id: int) -> str:
    """Name for category_id, or a placeholder when it is not in the lookup."""
    category = lookup.get(category_id)
    return category.name if category else NOT_FOUND_LABEL


def build_choice_map(items: list[Account] | list[Category]) -> dict[str, int]:
    """Combobox label -> id. Names that repeat get their id appended so every
    label resolves to exactly one record."""
    counts = Counter(item.name for item in items)
    return {
        (f"{item.name} (#{item.id})" if counts[item.name] > 1 else item.name): item.id
        for item in items
    }


def newest_window(
    transactions: list[MoneyTransaction], limit: int,
) -> list[MoneyTransaction]:
    """The last `limit` transactions, still in ascending order."""
    if limit <= 0:
        return []
    return transactions[-limit:]


def group_by_day(
    transactions: list[MoneyTransaction],
) -> list[tuple[date, list[MoneyTransaction]]]:
    """Split into runs of consecutive transactions sharing a calendar day.

    List order is preserved; a day that reappears later starts a new group.
    """
    groups: list[tuple[date, list[MoneyTransaction]]] = []
    for tx in transactions:
        day = tx.transaction_date.date()
        if groups and groups[-1][0] == day:
            groups[-1][1].append(tx)
        else:
            groups.append((day, [tx]))
    return groups


def parse_amount(text: str) -> float:
    """Parse user input such as '25.50' or '1,200' into a non-negative float."""
    cleaned = text.strip().replace(",", "")
    if not cleaned:
        raise ValueError("Amount is required.")
    try:
        amount = float(cleaned)
    except ValueError:
        raise ValueError(f"Invalid amount: {text!r}") from None
    if not math.isfinite(amount):
        raise ValueError(f"Invalid amount: {text!r}")
    if amount < 0:
        raise ValueError("Amount must be 0 or greater.")
    return amount


class TransactionService:
    def __init__(self, store: Store):
        self._store = store

    def get_all(self) -> list[MoneyTransaction]:
        return self._store.get_money_transactions()

    def create(
        self,
        bank_account: int,
        transaction_category: int,
        amount: float,
        transaction_date: datetime | None = None,
        description: str = "",
        is_expense: bool = True,
    ) -> None:
        if amount < 0:
            raise ValueError("Amount must be 0 or greater.")
        when = to_utc_naive(transaction_date) if transaction_date else utc_now()
        self._store.create_money_transaction(
            NewMoneyTransaction(
                bank_account=bank_account,
                transaction_category=transaction_category,
                amount=float(amount),
                description=description.strip(),
                transaction_date=when,
                is_expense=bool(is_expense),
            )
        )

    def expense_by_category(self, category_id: int, start: date, end: date) -> float:
        return self._store.calculate_expense_by_category(category_id, start, end)

    def refresh(self) -> TransactionPage:
        """Load a page snapshot; failed reads are logged and show as empty."""
        page = TransactionPage()
        try:
            page.transactions = self._store.get_money_transactions()
        except DataStoreError as e:
            logger.warning("Could not load transactions: %s", e)
        try:
            page.categories = self._store.get_categories()
        except DataStoreError as e:
            logger.warning("Could not load categories: %s", e)
        try:
            page.accounts = self._store.get_accounts()
        except DataStoreError as e:
            logger.warning("Could not load accounts: %s", e)
        try:
            page.currency_symbol = self._store.get_currency_symbol_by_id(get_currency_id())
        except DataStoreError as e:
            logger.warning("Could not load currency symbol: %s", e)
        page.category_lookup = build_category_lookup(page.categories)
        return page
