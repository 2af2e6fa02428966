import logging

import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from database.errors import DataStoreError
from services.report_service import ReportService
from utils.currency import format_currency
from utils.date_helpers import current_month_str, friendly_month, next_month, prev_month

logger = logging.getLogger(__name__)


class ReportsTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        report_service: ReportService,
        get_currency_symbol,   # callable → str
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._report_svc = report_service
        self._get_currency_symbol = get_currency_symbol
        self._month = current_month_str()
        self._month_var = ctk.StringVar(value=friendly_month(self._month))

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_toolbar()
        self._build_summary()
        self._build_chart()
        self._load()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        ctk.CTkLabel(bar, text="Month:").pack(side="left", padx=(12, 4), pady=8)
        ctk.CTkButton(bar, text="◀", width=28, command=self._prev_month).pack(side="left")
        ctk.CTkLabel(bar, textvariable=self._month_var, width=130, anchor="center").pack(side="left", padx=4)
        ctk.CTkButton(bar, text="▶", width=28, command=self._next_month).pack(side="left", padx=(0, 12))

    def _prev_month(self):
        self._month = prev_month(self._month)
        self._month_var.set(friendly_month(self._month))
        self._load()

    def _next_month(self):
        self._month = next_month(self._month)
        self._month_var.set(friendly_month(self._month))
        self._load()

    def _build_summary(self):
        card = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=10)
        card.grid(row=1, column=0, sticky="w", padx=16, pady=10)
        ctk.CTkLabel(card, text="Expenses", text_color="gray60").pack(pady=(10, 0), padx=16)
        self._total_label = ctk.CTkLabel(
            card, text="", text_color="#F44336",
            font=ctk.CTkFont(size=18, weight="bold"),
        )
        self._total_label.pack(pady=(4, 10), padx=16)

    def _build_chart(self):
        outer = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=8)
        outer.grid(row=2, column=0, sticky="nsew", padx=16, pady=(0, 12))
        ctk.CTkLabel(
            outer, text="Expense Breakdown",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        self._fig = Figure(figsize=(5, 3), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._canvas = FigureCanvasTkAgg(self._fig, master=outer)
        self._canvas.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 10))
        self._legend_frame = ctk.CTkFrame(outer, fg_color="transparent")
        self._legend_frame.pack(fill="x", padx=8, pady=(0, 8))

    def _load(self):
        try:
            breakdown = self._report_svc.get_category_breakdown(self._month)
        except DataStoreError as e:
            logger.warning("Could not load expense breakdown: %s", e)
            breakdown = []

        symbol = self._get_currency_symbol()
        total = sum(d["total"] for d in breakdown)
        self._total_label.configure(text=format_currency(total, symbol))

        for w in self._legend_frame.winfo_children():
            w.destroy()
        for item in breakdown[:8]:
            ctk.CTkLabel(
                self._legend_frame,
                text=f"{item['category']}: {format_currency(item['total'], symbol)}",
                anchor="w", font=ctk.CTkFont(size=11),
            ).pack(fill="x", pady=1)

        self.after(50, lambda b=breakdown: self._draw_pie_chart(b))

    def _draw_pie_chart(self, breakdown):
        ax = self._ax
        ax.clear()
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        self._fig.patch.set_facecolor(bg)
        ax.set_facecolor(bg)

        if not breakdown:
            ax.text(0.5, 0.5, "No expense data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            ax.set_axis_off()
            self._canvas.draw_idle()
            return

        ax.pie(
            [d["total"] for d in breakdown],
            labels=[d["category"] for d in breakdown],
            startangle=90,
            textprops={"color": "#aaaaaa" if is_dark else "#444444", "fontsize": 8},
        )
        ax.set_aspect("equal")
        self._canvas.draw_idle()
