from services.category_service import CategoryService
from services.transaction_service import TransactionService
from utils.date_helpers import current_month_str, month_bounds


class ReportService:
    def __init__(self, tx_service: TransactionService, category_service: CategoryService):
        self._tx_svc = tx_service
        self._cat_svc = category_service

    def get_category_breakdown(self, month: str | None = None) -> list[dict]:
        """Return [{category_id, category, total}, ...] for expense categories
        with spending in the month, largest first."""
        first, last = month_bounds(month or current_month_str())
        breakdown = []
        for cat in self._cat_svc.get_expense_categories():
            total = self._tx_svc.expense_by_category(cat.id, first, last)
            if total:
                breakdown.append({"category_id": cat.id, "category": cat.name, "total": total})
        breakdown.sort(key=lambda d: d["total"], reverse=True)
        return breakdown
