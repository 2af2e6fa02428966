from dataclasses import dataclass, field
from datetime import datetime

from utils.date_helpers import utc_now


@dataclass(frozen=True)
class MoneyTransaction:
    id: int
    bank_account: int           # account.id
    transaction_category: int   # category.id
    description: str
    amount: float               # magnitude; direction is is_expense
    transaction_date: datetime  # UTC, naive
    is_expense: bool


@dataclass(frozen=True)
class NewMoneyTransaction:
    bank_account: int
    transaction_category: int
    amount: float
    description: str = ""
    transaction_date: datetime = field(default_factory=utc_now)
    is_expense: bool = True
