from datetime import datetime

import pytest

from services.account_service import AccountService
from services.category_service import CategoryService
from services.report_service import ReportService
from services.transaction_service import TransactionService


@pytest.fixture()
def services(store):
    accounts = AccountService(store)
    categories = CategoryService(store)
    transactions = TransactionService(store)
    reports = ReportService(transactions, categories)

    accounts.create("Checking")
    categories.create("Groceries")
    categories.create("Rent")
    categories.create("Fuel")
    categories.create("Salary", is_income=True)
    account = accounts.get_all()[0]
    by_name = {c.name: c.id for c in categories.get_all()}

    def add(category, amount, when, is_expense=True):
        transactions.create(account.id, by_name[category], amount, transaction_date=when, is_expense=is_expense)

    add("Groceries", 40.0, datetime(2024, 1, 3, 10, 0))
    add("Groceries", 22.5, datetime(2024, 1, 31, 23, 59, 59))
    add("Rent", 900.0, datetime(2024, 1, 1, 0, 0))
    add("Fuel", 60.0, datetime(2024, 2, 1, 0, 0, 1))
    add("Salary", 3000.0, datetime(2024, 1, 25, 9, 0), is_expense=False)
    return reports


def test_breakdown_sorted_and_filtered(services):
    breakdown = services.get_category_breakdown("2024-01")
    assert [(d["category"], d["total"]) for d in breakdown] == [
        ("Rent", 900.0),
        ("Groceries", pytest.approx(62.5)),
    ]


def test_months_outside_range(services):
    assert [d["category"] for d in services.get_category_breakdown("2024-02")] == ["Fuel"]
    assert services.get_category_breakdown("2023-12") == []


def test_invalid_month(services):
    with pytest.raises(ValueError):
        services.get_category_breakdown("January")
