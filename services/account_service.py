from database.store import Store
from models.account import Account, NewAccount


class AccountService:
    def __init__(self, store: Store):
        self._store = store

    def get_all(self) -> list[Account]:
        return self._store.get_accounts()

    def create(
        self,
        name: str,
        account_type: str = "checking",
        initial_balance: float = 0.0,
    ) -> None:
        name = name.strip()
        if not name:
            raise ValueError("Account name cannot be empty.")
        account_type = account_type.strip()
        if not account_type:
            raise ValueError("Account type cannot be empty.")
        try:
            initial_balance = float(initial_balance)
        except (TypeError, ValueError):
            raise ValueError("Initial balance must be a number.") from None
        self._store.create_account(NewAccount(name, account_type, initial_balance))
