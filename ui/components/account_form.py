import customtkinter as ctk
from database.errors import DataStoreError
from services.account_service import AccountService
from utils.constants import ACCOUNT_TYPES


class AccountForm(ctk.CTkToplevel):
    """Add an account. Sets self.saved = True on success."""

    def __init__(self, master, account_service: AccountService, **kwargs):
        super().__init__(master, **kwargs)
        self._svc = account_service
        self.saved = False

        self.title("New Account")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        # Row 0: Name
        ctk.CTkLabel(self, text="Name:").grid(
            row=0, column=0, padx=(16, 8), pady=(16, 4), sticky="e"
        )
        self._name_var = ctk.StringVar()
        self._name_entry = ctk.CTkEntry(self, textvariable=self._name_var, width=240)
        self._name_entry.grid(row=0, column=1, padx=(0, 16), pady=(16, 4), sticky="ew")

        # Row 1: Account Type (editable: any text is accepted)
        ctk.CTkLabel(self, text="Account Type:").grid(
            row=1, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        self._type_combo = ctk.CTkComboBox(self, values=ACCOUNT_TYPES, width=240)
        self._type_combo.set(ACCOUNT_TYPES[0])
        self._type_combo.grid(row=1, column=1, padx=(0, 16), pady=4, sticky="ew")

        # Row 2: Initial Balance
        ctk.CTkLabel(self, text="Initial Balance:").grid(
            row=2, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        self._balance_var = ctk.StringVar(value="0.00")
        ctk.CTkEntry(self, textvariable=self._balance_var, width=240).grid(
            row=2, column=1, padx=(0, 16), pady=4, sticky="ew"
        )

        # Row 3: Error label
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var, text_color="#F44336",
            wraplength=280, anchor="w"
        ).grid(row=3, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")

        # Row 4: Buttons
        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=4, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(
            btn_frame, text="Save", width=90,
            command=self._on_save,
        ).pack(side="right")

        self.transient(master)
        self.grab_set()
        self._center()
        self._name_entry.focus_set()

    def _on_save(self):
        try:
            balance = float(self._balance_var.get().strip() or 0)
        except ValueError:
            self._error_var.set("Initial balance must be a number.")
            return
        try:
            self._svc.create(self._name_var.get(), self._type_combo.get(), balance)
        except (ValueError, DataStoreError) as e:
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
