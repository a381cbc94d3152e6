"""
Read-side rollups: stock report, financial report, dashboard counters.

Money is summed in Python as Decimal (the columns hold decimal text), so
totals are exact regardless of the backing database.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Dict, List

from repairdesk.models.service import ServiceStatus
from repairdesk.models.stock_movement import StockMovementType
from repairdesk.models.transaction import TransactionType
from repairdesk.repositories.customer_repo import CustomerRepository
from repairdesk.repositories.product_repo import ProductRepository
from repairdesk.repositories.service_repo import ServiceRepository
from repairdesk.repositories.stock_movement_repo import StockMovementRepository
from repairdesk.repositories.transaction_repo import TransactionRepository
from repairdesk.services.inventory_service import is_low_stock
from repairdesk.utils.clock import day_window, month_start, utcnow
from repairdesk.utils.money import sum_money, to_money
from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.reports")


class ReportService:
    def __init__(self, db: Session):
        self.db = db

    def stock_report(self) -> List[Dict]:
        products = ProductRepository(self.db).list()
        totals = StockMovementRepository(self.db).totals_by_product()
        rows = []
        for p in products:
            rows.append(
                {
                    "product_id": p.id,
                    "product_name": p.name,
                    "current_stock": p.stock_quantity,
                    "minimum_stock": p.minimum_stock,
                    "stock_in": totals.get((p.id, StockMovementType.IN), 0),
                    "stock_out": totals.get((p.id, StockMovementType.OUT), 0),
                    "stock_value": to_money(p.price * p.stock_quantity),
                    "is_low_stock": is_low_stock(p),
                }
            )
        return rows

    def financial_report(self, period: str, start: datetime, end: datetime) -> Dict:
        """
        Revenue over start <= created_at <= end, split by transaction type.
        ``period`` is echoed as a label only; it does not bucket anything.
        """
        matching = TransactionRepository(self.db).between(start, end, inclusive_end=True)
        by_type = {t: Decimal("0") for t in TransactionType}
        for tx in matching:
            by_type[tx.type] += tx.total_amount
        report = {
            "period": period,
            "total_revenue": sum_money(tx.total_amount for tx in matching),
            "service_revenue": to_money(by_type[TransactionType.SERVICE]),
            "sales_revenue": to_money(by_type[TransactionType.SALE]),
            "total_transactions": len(matching),
            "period_start": start,
            "period_end": end,
        }
        log.debug("financial report %s..%s: %s transactions", start, end, len(matching))
        return report

    def dashboard_stats(self, now: datetime = None) -> Dict:
        # each counter is its own query; no shared snapshot across them
        now = now or utcnow()
        today_start, tomorrow_start = day_window(now)
        services = ServiceRepository(self.db)
        transactions = TransactionRepository(self.db)
        return {
            "total_customers": CustomerRepository(self.db).count(),
            "pending_services": services.count_by_status(ServiceStatus.PENDING),
            "completed_services_today": services.count_completed_between(today_start, tomorrow_start),
            "low_stock_items": ProductRepository(self.db).count_low_stock(),
            "today_revenue": sum_money(
                tx.paid_amount
                for tx in transactions.between(today_start, tomorrow_start, inclusive_end=False)
            ),
            "this_month_revenue": sum_money(
                tx.paid_amount for tx in transactions.between(month_start(now))
            ),
        }
