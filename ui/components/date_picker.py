import customtkinter as ctk
from tkcalendar import Calendar
import tkinter as tk
from tkinter import ttk
from datetime import date
from utils.date_helpers import format_date, format_display_date, parse_display_date


class DatePickerWidget(ctk.CTkFrame):
    """CTkEntry in display format + calendar popup button.

    .get_date() returns a date or None when the entry doesn't parse.
    """

    def __init__(
        self,
        master,
        initial_date: date | None = None,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self._popup: ctk.CTkToplevel | None = None
        self._var = tk.StringVar()

        self._entry = ctk.CTkEntry(self, textvariable=self._var, width=110)
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._on_focus_out)
        self._entry.bind("<Return>", self._on_focus_out)

        ctk.CTkButton(
            self, text="📅", width=32, command=self._open_popup
        ).grid(row=0, column=1, padx=(4, 0))

        self.set_date(initial_date or date.today())

    def get_date(self) -> date | None:
        return parse_display_date(self._var.get().strip())

    def set_date(self, d: date):
        self._var.set(self._display(d))
        self._reset_border()

    def is_valid(self) -> bool:
        return self.get_date() is not None

    def _display(self, d: date) -> str:
        return format_display_date(format_date(d))

    def _on_focus_out(self, _event=None):
        d = self.get_date()
        if d:
            self.set_date(d)
        elif self._var.get().strip():
            self._entry.configure(border_color="#F44336")

    def _reset_border(self):
        self._entry.configure(border_color=("gray65", "gray35"))

    def _open_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._close_popup()
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#ffffff"
        fg = "#ffffff" if is_dark else "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure("Calendar.Treeview", background=bg, foreground=fg, fieldbackground=bg)

        current = self.get_date() or date.today()
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#1f6aa5",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal))

        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")

    def _on_date_selected(self, cal: Calendar):
        # selection_get() hands back a datetime.date regardless of date_pattern
        self.set_date(cal.selection_get())
        self._close_popup()

    def _close_popup(self):
        if self._popup is not None:
            self._popup.destroy()
            self._popup = None
