from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from finance_insights.models.transaction import Balance, Transaction


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CategoryTotal(_Frozen):
    category: str
    amount: float
    count: int


class CategoryUsage(_Frozen):
    category: str
    count: int


class MonthlyTotal(_Frozen):
    month: str
    income: float
    expenses: float


class DailyTotal(_Frozen):
    day: str
    amount: float
    count: int


class WeeklyComparison(_Frozen):
    this_week: float
    last_week: float
    change: float
    change_percent: float


class AnalyticsData(_Frozen):
    """Snapshot of derived statistics for one list of transactions."""

    total_income: float
    total_expenses: float
    net_change: float
    transaction_count: int
    average_transaction: float
    largest_transaction: Optional[Transaction] = None
    most_used_category: Optional[CategoryUsage] = None
    category_breakdown: List[CategoryTotal] = Field(default_factory=list)
    monthly_trend: List[MonthlyTotal] = Field(default_factory=list)
    daily_pattern: List[DailyTotal] = Field(default_factory=list)
    weekly_comparison: WeeklyComparison


class InsightKind(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


class Insight(_Frozen):
    message: str
    kind: InsightKind


class DashboardStats(_Frozen):
    total_accounts: int
    total_transactions: int
    currencies: List[str]
    this_month_transactions: int
    most_used_category: str
    recent_transactions: List[Transaction]


class AnalyticsRequest(BaseModel):
    transactions: List[Transaction] = Field(default_factory=list)
    now: Optional[datetime] = None


class AnalyticsResponse(BaseModel):
    analytics: AnalyticsData
    insights: List[Insight]
    currency: str


class DashboardRequest(BaseModel):
    balances: List[Balance] = Field(default_factory=list)
    transactions: List[Transaction] = Field(default_factory=list)
    now: Optional[datetime] = None
