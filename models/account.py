from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    id: int
    name: str
    account_type: str       # free-form, e.g. 'checking' | 'savings'
    initial_balance: float


@dataclass(frozen=True)
class NewAccount:
    name: str
    account_type: str
    initial_balance: float = 0.0
