import logging
import os
import sys
import customtkinter as ctk
from dotenv import load_dotenv

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.store import Store

from services.account_service import AccountService
from services.category_service import CategoryService
from services.transaction_service import TransactionService
from services.report_service import ReportService

from ui.app_window import AppWindow
from utils.constants import LOG_LEVEL_ENV

logger = logging.getLogger(__name__)


def configure_logging():
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main():
    # ── Environment & logging ────────────────────────────────────────────────
    load_dotenv()
    configure_logging()

    # ── Store: exits the process if DATABASE_URL is missing or unusable ──────
    store = Store()

    # ── Services ─────────────────────────────────────────────────────────────
    account_svc = AccountService(store)
    category_svc = CategoryService(store)
    tx_svc = TransactionService(store)
    report_svc = ReportService(tx_svc, category_svc)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode("system")
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        store=store,
        account_service=account_svc,
        category_service=category_svc,
        tx_service=tx_svc,
        report_service=report_svc,
    )

    def on_close():
        store.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    logger.info("Starting UI")
    app.mainloop()


if __name__ == "__main__":
    main()
