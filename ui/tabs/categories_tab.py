import logging

import customtkinter as ctk
from database.errors import DataStoreError
from services.category_service import CategoryService
from ui.components.category_form import CategoryForm

logger = logging.getLogger(__name__)


class CategoriesTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        category_service: CategoryService,
        notify_refresh,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = category_service
        self._notify_refresh = notify_refresh

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
            bar, text="Categories",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(side="left", padx=(12, 16), pady=8)

        ctk.CTkButton(
            bar, text="+ Add Category", command=self._open_add,
        ).pack(side="left", padx=4, pady=6)

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
        self._scroll.grid_columnconfigure(0, weight=1)

    def _load(self):
        for w in self._scroll.winfo_children():
            w.destroy()

        try:
            categories = self._svc.get_all()
        except DataStoreError as e:
            logger.warning("Could not load categories: %s", e)
            categories = []

        if not categories:
            ctk.CTkLabel(
                self._scroll,
                text="No categories yet.",
                text_color="gray60",
            ).grid(row=0, column=0, pady=40)
            return

        for idx, cat in enumerate(categories):
            row = ctk.CTkFrame(
                self._scroll, fg_color=("gray90", "gray20"), corner_radius=8
            )
            row.grid(row=idx, column=0, sticky="ew", padx=4, pady=3)
            row.grid_columnconfigure(0, weight=1)

            ctk.CTkLabel(
                row, text=cat.name,
                font=ctk.CTkFont(size=13, weight="bold"), anchor="w",
            ).grid(row=0, column=0, padx=12, pady=8, sticky="w")

            label, color = ("income", "#4CAF50") if cat.is_income else ("expense", "#F44336")
            ctk.CTkLabel(
                row, text=label, width=70, anchor="center",
                text_color=color,
                font=ctk.CTkFont(size=11, weight="bold"),
            ).grid(row=0, column=1, padx=(4, 12))

    def _open_add(self):
        form = CategoryForm(self.winfo_toplevel(), self._svc)
        self.wait_window(form)
        if form.saved:
            self.after(0, lambda: self._notify_refresh("category"))
