import logging

import customtkinter as ctk
from database.errors import DataStoreError
from database.store import Store
from models.account import Account
from models.currency import Currency
from services.account_service import AccountService
from services.category_service import CategoryService
from services.report_service import ReportService
from services.transaction_service import TransactionService
from ui.components.account_form import AccountForm
from ui.tabs.categories_tab import CategoriesTab
from ui.tabs.reports_tab import ReportsTab
from ui.tabs.transactions_tab import TransactionsTab
from utils.app_config import get_currency_id, set_currency_id
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT, DEFAULT_CURRENCY_SYMBOL
from utils.currency import format_currency

logger = logging.getLogger(__name__)


_REFRESH_SCOPES: dict[str, set[str]] = {
    "transaction": {"transactions", "reports"},
    "category":    {"transactions", "categories", "reports"},
    "account":     {"transactions"},
    "currency":    {"transactions", "reports"},
    "full":        {"transactions", "categories", "reports"},
}


class AppWindow(ctk.CTk):
    def __init__(
        self,
        store: Store,
        account_service: AccountService,
        category_service: CategoryService,
        tx_service: TransactionService,
        report_service: ReportService,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._store = store
        self._acct_svc = account_service
        self._cat_svc = category_service
        self._tx_svc = tx_service
        self._report_svc = report_service

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self._currencies = self._load_currencies()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_account_bar()
        self._build_tabs()

    # ── Account bar ─────────────────────────────────────────────────────────
    def _build_account_bar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=44)
        bar.grid(row=0, column=0, sticky="ew")
        bar.grid_propagate(False)

        ctk.CTkLabel(bar, text="Accounts:", anchor="e").pack(side="left", padx=(12, 4), pady=8)
        self._acct_combo = ctk.CTkComboBox(bar, values=[], width=260, state="readonly")
        self._acct_combo.pack(side="left", padx=4)

        ctk.CTkButton(
            bar, text="+ New Account", width=110,
            command=self._open_new_account,
        ).pack(side="left", padx=4)

        currency_names = [f"{c.name} ({c.symbol})" for c in self._currencies]
        self._currency_combo = ctk.CTkComboBox(
            bar, values=currency_names, width=180, state="readonly",
            command=self._on_currency_changed,
        )
        current = next((c for c in self._currencies if c.id == get_currency_id()), None)
        self._currency_combo.set(f"{current.name} ({current.symbol})" if current else "")
        self._currency_combo.pack(side="right", padx=(4, 12))
        ctk.CTkLabel(bar, text="Currency:").pack(side="right", padx=4)

        self._refresh_account_bar()

    def _refresh_account_bar(self):
        try:
            accounts = self._acct_svc.get_all()
        except DataStoreError as e:
            logger.warning("Could not load accounts: %s", e)
            accounts = []
        labels = [self._account_label(a) for a in accounts]
        self._acct_combo.configure(values=labels)
        self._acct_combo.set(labels[0] if labels else "No accounts")

    def _account_label(self, account: Account) -> str:
        balance = format_currency(account.initial_balance, self.currency_symbol())
        return f"{account.name} [{account.account_type}] {balance}"

    def _open_new_account(self):
        form = AccountForm(self, self._acct_svc)
        self.wait_window(form)
        if form.saved:
            self.after(0, lambda: self.notify_tabs_refresh("account"))

    # ── Currency ─────────────────────────────────────────────────────────────
    def _load_currencies(self) -> list[Currency]:
        try:
            return self._store.get_currencies()
        except DataStoreError as e:
            logger.warning("Could not load currencies: %s", e)
            return []

    def _on_currency_changed(self, value: str):
        names = [f"{c.name} ({c.symbol})" for c in self._currencies]
        if value in names:
            set_currency_id(self._currencies[names.index(value)].id)
            self.notify_tabs_refresh("currency")

    def currency_symbol(self) -> str:
        match = next((c for c in self._currencies if c.id == get_currency_id()), None)
        return match.symbol if match else DEFAULT_CURRENCY_SYMBOL

    # ── Tabs ─────────────────────────────────────────────────────────────────
    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))

        for tab_name in ("Transactions", "Categories", "Reports"):
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._transactions_tab = TransactionsTab(
            self._tabview.tab("Transactions"),
            tx_service=self._tx_svc,
            notify_refresh=self.notify_tabs_refresh,
        )
        self._transactions_tab.grid(row=0, column=0, sticky="nsew")

        self._categories_tab = CategoriesTab(
            self._tabview.tab("Categories"),
            category_service=self._cat_svc,
            notify_refresh=self.notify_tabs_refresh,
        )
        self._categories_tab.grid(row=0, column=0, sticky="nsew")

        self._reports_tab = ReportsTab(
            self._tabview.tab("Reports"),
            report_service=self._report_svc,
            get_currency_symbol=self.currency_symbol,
        )
        self._reports_tab.grid(row=0, column=0, sticky="nsew")

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_tabs_refresh(self, scope: str = "full"):
        tabs = _REFRESH_SCOPES.get(scope, _REFRESH_SCOPES["full"])
        if scope in ("account", "currency", "full"):
            self._refresh_account_bar()
        if "transactions" in tabs: self._transactions_tab.refresh()
        if "categories"   in tabs: self._categories_tab.refresh()
        if "reports"      in tabs: self._reports_tab.refresh()
