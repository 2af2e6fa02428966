import logging

import customtkinter as ctk
from database.errors import DataStoreError
from models.account import Account
from models.category import Category
from services.transaction_service import TransactionService, build_choice_map, parse_amount
from ui.components.date_picker import DatePickerWidget
from utils.date_helpers import local_date_to_utc

logger = logging.getLogger(__name__)

_EXPENSE = "Expense"
_INCOME = "Income"


class TransactionForm(ctk.CTkToplevel):
    """Add an expense or income. Sets self.saved = True on success."""

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        accounts: list[Account],
        categories: list[Category],
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._tx_svc = tx_service
        self.saved = False

        self.title("Add Transaction")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        r = 0

        # Expense / income
        self._type_var = ctk.StringVar(value=_EXPENSE)
        ctk.CTkSegmentedButton(
            self, values=[_EXPENSE, _INCOME], variable=self._type_var,
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(16, 8), sticky="ew")
        r += 1

        self._label("Amount:", r)
        self._amount_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._amount_var, width=200).grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._label("Date:", r)
        self._date_picker = DatePickerWidget(self)
        self._date_picker.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        r += 1

        self._label("Category:", r)
        self._cat_choices = build_choice_map(categories)
        cat_names = list(self._cat_choices)
        self._cat_combo = ctk.CTkComboBox(
            self, values=cat_names, width=200, state="readonly"
        )
        self._cat_combo.set(cat_names[0] if cat_names else "")
        self._cat_combo.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._label("Bank Account:", r)
        self._acct_choices = build_choice_map(accounts)
        acct_names = list(self._acct_choices)
        self._acct_combo = ctk.CTkComboBox(
            self, values=acct_names, width=200, state="readonly"
        )
        self._acct_combo.set(acct_names[0] if acct_names else "")
        self._acct_combo.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._label("Note:", r)
        self._note_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._note_var, width=200).grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._build_footer(r)

        self.transient(master)
        self.grab_set()
        self._center()

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    def _build_footer(self, r):
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=280, anchor="w"
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="#F44336", hover_color="#D32F2F",
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(
            btn_frame, text="Add Transaction", width=130,
            command=self._on_save,
        ).pack(side="right")

    def _on_save(self):
        try:
            amount = parse_amount(self._amount_var.get())
        except ValueError as e:
            self._error_var.set(str(e))
            return

        day = self._date_picker.get_date()
        if day is None:
            self._error_var.set("Invalid date.")
            return

        category_id = self._cat_choices.get(self._cat_combo.get())
        if category_id is None:
            self._error_var.set("Please select a category.")
            return
        account_id = self._acct_choices.get(self._acct_combo.get())
        if account_id is None:
            self._error_var.set("Please select a bank account.")
            return

        try:
            self._tx_svc.create(
                bank_account=account_id,
                transaction_category=category_id,
                amount=amount,
                transaction_date=local_date_to_utc(day),
                description=self._note_var.get(),
                is_expense=self._type_var.get() == _EXPENSE,
            )
        except (ValueError, DataStoreError) as e:
            logger.warning("Transaction not saved: %s", e)
            self._error_var.set(str(e))
            return
        self.saved = True
        self.destroy()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
