from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel

from repairdesk.schemas.common import Money
from repairdesk.schemas.service_schema import ServiceOut
from repairdesk.schemas.transaction_schema import TransactionOut


class ReportPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class StockReportRow(BaseModel):
    product_id: int
    product_name: str
    current_stock: int
    minimum_stock: int
    stock_in: int
    stock_out: int
    stock_value: Money
    is_low_stock: bool


class FinancialReport(BaseModel):
    period: ReportPeriod
    total_revenue: Money
    service_revenue: Money
    sales_revenue: Money
    total_transactions: int
    period_start: datetime
    period_end: datetime


class DashboardStats(BaseModel):
    total_customers: int
    pending_services: int
    completed_services_today: int
    low_stock_items: int
    today_revenue: Money
    this_month_revenue: Money


class CustomerHistory(BaseModel):
    services: List[ServiceOut]
    transactions: List[TransactionOut]
