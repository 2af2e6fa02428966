import customtkinter as ctk
from models.transaction import MoneyTransaction
from services.transaction_service import (
    TransactionPage, TransactionService, category_label, group_by_day, newest_window,
)
from ui.components.transaction_form import TransactionForm
from utils.currency import format_signed
from utils.date_helpers import day_heading, format_local_datetime


_MAX_RENDERED_ROWS = 200


class TransactionsTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        tx_service: TransactionService,
        notify_refresh,   # callable(scope)
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._tx_svc = tx_service
        self._notify_refresh = notify_refresh
        self._page = TransactionPage()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_toolbar()
        self._build_list()
        self._load()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        ctk.CTkLabel(
            bar, text="Transactions",
            font=ctk.CTkFont(size=16, weight="bold"),
        ).pack(side="left", padx=(12, 16), pady=8)

        ctk.CTkButton(
            bar, text="+ Add Transaction", command=self._open_add_form,
        ).pack(side="right", padx=8, pady=6)

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
        self._scroll.grid_columnconfigure(0, weight=1)

    def _load(self):
        for w in self._scroll.winfo_children():
            w.destroy()

        self._page = self._tx_svc.refresh()
        transactions = self._page.transactions
        if not transactions:
            ctk.CTkLabel(
                self._scroll, text="No transactions yet.", text_color="gray60",
            ).grid(row=0, column=0, pady=40)
            return

        r = 0
        for day, day_txs in group_by_day(newest_window(transactions, _MAX_RENDERED_ROWS)):
            ctk.CTkLabel(
                self._scroll, text=day_heading(day), anchor="w",
                font=ctk.CTkFont(size=14, weight="bold"),
            ).grid(row=r, column=0, sticky="ew", padx=6, pady=(10, 2))
            r += 1
            for tx in day_txs:
                self._add_card(r, tx)
                r += 1

        if len(transactions) > _MAX_RENDERED_ROWS:
            ctk.CTkLabel(
                self._scroll,
                text=f"Showing the latest {_MAX_RENDERED_ROWS} of {len(transactions)} transactions.",
                text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).grid(row=r, column=0, pady=8)

    def _add_card(self, r: int, tx: MoneyTransaction):
        card = ctk.CTkFrame(self._scroll, fg_color=("gray90", "gray20"), corner_radius=8)
        card.grid(row=r, column=0, sticky="ew", padx=4, pady=4)
        card.grid_columnconfigure((0, 1, 2), weight=1)

        amt_color = "#F44336" if tx.is_expense else "#4CAF50"
        ctk.CTkLabel(
            card,
            text=f"Amount: {format_signed(tx.amount, tx.is_expense, self._page.currency_symbol)}",
            text_color=amt_color, anchor="w",
        ).grid(row=0, column=0, padx=10, pady=(8, 4), sticky="w")
        ctk.CTkLabel(
            card,
            text=f"Category: {category_label(self._page.category_lookup, tx.transaction_category)}",
            anchor="w",
        ).grid(row=0, column=1, padx=10, pady=(8, 4), sticky="w")
        ctk.CTkLabel(
            card, text=f"Date: {format_local_datetime(tx.transaction_date)}", anchor="w",
        ).grid(row=0, column=2, padx=10, pady=(8, 4), sticky="w")

        if tx.description:
            ctk.CTkLabel(
                card, text=f"Note: {tx.description}", anchor="w", text_color="gray60",
            ).grid(row=1, column=0, columnspan=3, padx=10, pady=(0, 8), sticky="w")

    def _open_add_form(self):
        form = TransactionForm(
            self.winfo_toplevel(),
            self._tx_svc,
            accounts=self._page.accounts,
            categories=self._page.categories,
        )
        self.wait_window(form)
        if form.saved:
            # Let the form finish tearing down before rebuilding the list
            self.after(0, lambda: self._notify_refresh("transaction"))
