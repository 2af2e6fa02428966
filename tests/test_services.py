from datetime import date, datetime, timedelta, timezone

import pytest

from models.category import Category
from models.transaction import MoneyTransaction
from services.account_service import AccountService
from services.category_service import CategoryService
from services.transaction_service import (
    TransactionService,
    build_category_lookup,
    build_choice_map,
    category_label,
    group_by_day,
    newest_window,
    parse_amount,
)
from utils.app_config import set_currency_id


@pytest.fixture()
def account_service(store):
    return AccountService(store)


@pytest.fixture()
def category_service(store):
    return CategoryService(store)


@pytest.fixture()
def tx_service(store):
    return TransactionService(store)


def _tx(tx_id, when):
    return MoneyTransaction(tx_id, 1, 1, "", 1.0, when, True)


# ── Accounts ──────────────────────────────────────────────────────────────────

class TestAccountService:
    def test_create_strips_name(self, account_service):
        account_service.create("  Checking  ", "checking", "150.25")
        account = account_service.get_all()[0]
        assert account.name == "Checking"
        assert account.initial_balance == 150.25

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"name": "   "}, "Account name cannot be empty."),
            ({"name": "Cash", "account_type": " "}, "Account type cannot be empty."),
            ({"name": "Cash", "initial_balance": "lots"}, "Initial balance must be a number."),
        ],
    )
    def test_validation(self, account_service, kwargs, message):
        with pytest.raises(ValueError, match=message):
            account_service.create(**kwargs)
        assert account_service.get_all() == []


# ── Categories ────────────────────────────────────────────────────────────────

class TestCategoryService:
    def test_expense_categories(self, category_service):
        category_service.create("Salary", is_income=True)
        category_service.create("Groceries")
        assert [c.name for c in category_service.get_expense_categories()] == ["Groceries"]
        assert len(category_service.get_all()) == 2

    def test_empty_name_rejected(self, category_service):
        with pytest.raises(ValueError, match="Category name cannot be empty."):
            category_service.create("")


# ── Transactions ──────────────────────────────────────────────────────────────

class TestParseAmount:
    @pytest.mark.parametrize(
        "text, expected",
        [("25.50", 25.5), (" 1,200 ", 1200.0), ("0", 0.0)],
    )
    def test_valid(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize(
        "text, message",
        [
            ("", "Amount is required."),
            ("abc", "Invalid amount"),
            ("nan", "Invalid amount"),
            ("inf", "Invalid amount"),
            ("-3", "Amount must be 0 or greater."),
        ],
    )
    def test_invalid(self, text, message):
        with pytest.raises(ValueError, match=message):
            parse_amount(text)


class TestTransactionService:
    def _setup(self, account_service, category_service):
        account_service.create("Checking")
        category_service.create("Groceries")
        return account_service.get_all()[0], category_service.get_all()[0]

    def test_create_and_sum(self, account_service, category_service, tx_service):
        account, category = self._setup(account_service, category_service)
        tx_service.create(
            account.id, category.id, 12.0,
            transaction_date=datetime(2024, 1, 5, 10, 0),
            description="  market  ",
        )
        tx = tx_service.get_all()[0]
        assert tx.description == "market"
        assert tx.is_expense is True
        assert tx_service.expense_by_category(category.id, date(2024, 1, 1), date(2024, 1, 31)) == 12.0

    def test_aware_date_converted(self, account_service, category_service, tx_service):
        account, category = self._setup(account_service, category_service)
        when = datetime(2024, 1, 5, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        tx_service.create(account.id, category.id, 1.0, transaction_date=when)
        assert tx_service.get_all()[0].transaction_date == datetime(2024, 1, 4, 22, 0)

    def test_negative_amount_rejected(self, account_service, category_service, tx_service):
        account, category = self._setup(account_service, category_service)
        with pytest.raises(ValueError):
            tx_service.create(account.id, category.id, -1.0)
        assert tx_service.get_all() == []

    def test_refresh(self, account_service, category_service, tx_service):
        account, category = self._setup(account_service, category_service)
        tx_service.create(account.id, category.id, 4.0, transaction_date=datetime(2024, 2, 1))
        set_currency_id(2)

        page = tx_service.refresh()
        assert len(page.transactions) == 1
        assert [a.name for a in page.accounts] == ["Checking"]
        assert page.category_lookup == {category.id: category}
        assert page.currency_symbol == "€"

    def test_refresh_unknown_currency_falls_back(self, tx_service):
        set_currency_id(999)
        assert tx_service.refresh().currency_symbol == "USD"

    def test_refresh_on_closed_store_is_empty(self, store, tx_service):
        store.close()
        page = tx_service.refresh()
        assert page.transactions == []
        assert page.accounts == []
        assert page.categories == []
        assert page.category_lookup == {}
        assert page.currency_symbol == "USD"


class TestCategoryLookup:
    def test_label(self):
        lookup = build_category_lookup([Category(1, "Rent", False), Category(2, "Pay", True)])
        assert category_label(lookup, 2) == "Pay"
        assert category_label(lookup, 3) == "Not found"


class TestGroupByDay:
    def test_consecutive_runs(self):
        txs = [
            _tx(1, datetime(2024, 1, 15, 9, 0)),
            _tx(2, datetime(2024, 1, 15, 18, 0)),
            _tx(3, datetime(2024, 1, 16, 8, 0)),
            _tx(4, datetime(2024, 1, 15, 20, 0)),
        ]
        groups = group_by_day(txs)
        assert [(day, [t.id for t in items]) for day, items in groups] == [
            (date(2024, 1, 15), [1, 2]),
            (date(2024, 1, 16), [3]),
            (date(2024, 1, 15), [4]),
        ]

    def test_empty(self):
        assert group_by_day([]) == []


class TestChoiceMap:
    def test_unique_names_are_plain(self):
        categories = [Category(1, "Rent", False), Category(2, "Pay", True)]
        assert build_choice_map(categories) == {"Rent": 1, "Pay": 2}

    def test_repeated_names_resolve_to_their_own_id(self, category_service, tx_service, account_service):
        category_service.create("Food")
        category_service.create("Food", is_income=True)
        account_service.create("Main")
        account_service.create("Main", "savings")
        choices = build_choice_map(category_service.get_all())
        accounts = build_choice_map(account_service.get_all())
        first, second = category_service.get_all()

        assert choices == {f"Food (#{first.id})": first.id, f"Food (#{second.id})": second.id}
        assert len(accounts) == 2

        savings = account_service.get_all()[1]
        tx_service.create(
            accounts[f"Main (#{savings.id})"], choices[f"Food (#{second.id})"], 5.0,
            transaction_date=datetime(2024, 3, 1),
        )
        tx = tx_service.get_all()[0]
        assert tx.transaction_category == second.id
        assert tx.bank_account == savings.id


class TestNewestWindow:
    def test_keeps_the_latest_rows_in_order(self):
        txs = [_tx(i, datetime(2024, 1, 1) + timedelta(hours=i)) for i in range(1, 202)]
        shown = newest_window(txs, 200)
        assert len(shown) == 200
        assert shown[-1].id == 201
        assert shown[0].id == 2
        assert [t.id for t in shown] == sorted(t.id for t in shown)

    def test_short_list_is_untouched(self):
        txs = [_tx(1, datetime(2024, 1, 1)), _tx(2, datetime(2024, 1, 2))]
        assert newest_window(txs, 200) == txs
        assert newest_window(txs, 0) == []
