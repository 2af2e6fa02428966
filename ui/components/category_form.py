import customtkinter as ctk
from database.errors import DataStoreError
from services.category_service import CategoryService


class CategoryForm(ctk.CTkToplevel):
    """Add a category."""

    TYPES = ["expense", "income"]

    def __init__(self, master, category_service: CategoryService, **kwargs):
        super().__init__(master, **kwargs)
        self._svc = category_service
        self.saved = False

        self.title("New Category")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(self, text="Name:").grid(
            row=0, column=0, padx=(16, 8), pady=(16, 4), sticky="e"
        )
        self._name_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._name_var, width=220).grid(
            row=0, column=1, padx=(0, 16), pady=(16, 4), sticky="ew"
        )

        ctk.CTkLabel(self, text="Type:").grid(
            row=1, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        self._type_var = ctk.StringVar(value="expense")
        ctk.CTkSegmentedButton(
            self, values=self.TYPES, variable=self._type_var,
        ).grid(row=1, column=1, padx=(0, 16), pady=4, sticky="ew")

        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=300, anchor="w",
        ).grid(row=2, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=3, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(btn_frame, text="Save", width=90, command=self._on_save).pack(side="right")

        self.transient(master)
        self.grab_set()
        self._center()

    def _on_save(self):
        try:
            self._svc.create(self._name_var.get(), self._type_var.get() == "income")
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
