from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime, time, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from finance_insights.models.analytics import (
    AnalyticsData,
    CategoryTotal,
    CategoryUsage,
    DailyTotal,
    MonthlyTotal,
    WeeklyComparison,
)
from finance_insights.models.transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)

# English labels regardless of the process locale
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

DAILY_PATTERN_DAYS = 7


def to_local(value: Optional[datetime]) -> Optional[datetime]:
    """Drop timezone info so aware and naive timestamps compare as local wall-clock time."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def month_label(year: int, month: int) -> str:
    return f"{MONTH_LABELS[month - 1]} {year}"


def weekday_label(value: datetime) -> str:
    return WEEKDAY_LABELS[value.weekday()]


def start_of_week(now: datetime) -> datetime:
    """Midnight of the most recent Sunday, today included."""
    days_since_sunday = (now.weekday() + 1) % 7
    return datetime.combine(now.date() - timedelta(days=days_since_sunday), time.min)


class TransactionAnalyzer:
    """
    Derives summary statistics, category breakdowns and time trends from a
    list of transactions.

    The analyzer holds configuration only. Every method is a pure function
    of its arguments, with ``now`` anchoring the date windows.
    """

    def __init__(self, trend_months: int = 6) -> None:
        if trend_months < 1:
            raise ValueError(f"trend_months must be at least 1, got {trend_months}")
        self._trend_months = trend_months

    @staticmethod
    def totals(transactions: Sequence[Transaction]) -> Tuple[float, float]:
        income = sum(t.amount for t in transactions if t.type == TransactionType.INCOME)
        expenses = sum(t.amount for t in transactions if t.type == TransactionType.EXPENSE)
        return float(income), float(expenses)

    @staticmethod
    def largest_transaction(transactions: Iterable[Transaction]) -> Optional[Transaction]:
        largest: Optional[Transaction] = None
        for current in transactions:
            # strict comparison keeps the first of equal amounts
            if largest is None or current.amount > largest.amount:
                largest = current
        return largest

    @staticmethod
    def category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryTotal]:
        amounts: Dict[str, float] = defaultdict(float)
        counts: Dict[str, int] = defaultdict(int)
        for t in transactions:
            name = t.category_name
            counts[name] += 1
            amounts[name] += t.amount if t.type == TransactionType.EXPENSE else 0.0

        breakdown = [
            CategoryTotal(category=name, amount=amounts[name], count=count)
            for name, count in counts.items()
        ]
        # sorted() is stable, so ties keep first-encounter order
        return sorted(breakdown, key=lambda item: item.amount, reverse=True)

    def monthly_trend(self, transactions: Iterable[Transaction]) -> List[MonthlyTotal]:
        buckets: Dict[Tuple[int, int], Dict[str, float]] = defaultdict(
            lambda: {"income": 0.0, "expenses": 0.0}
        )
        for t in transactions:
            when = to_local(t.date)
            if when is None:
                continue
            bucket = buckets[(when.year, when.month)]
            if t.type == TransactionType.INCOME:
                bucket["income"] += t.amount
            else:
                bucket["expenses"] += t.amount

        recent = sorted(buckets)[-self._trend_months:]
        return [
            MonthlyTotal(month=month_label(*key), **buckets[key])
            for key in recent
        ]

    @staticmethod
    def daily_pattern(transactions: Iterable[Transaction], now: datetime) -> List[DailyTotal]:
        today = now.date()
        labels = [
            WEEKDAY_LABELS[(today - timedelta(days=offset)).weekday()]
            for offset in range(DAILY_PATTERN_DAYS - 1, -1, -1)
        ]

        window_start = now - timedelta(days=DAILY_PATTERN_DAYS)
        amounts: Dict[str, float] = defaultdict(float)
        counts: Dict[str, int] = defaultdict(int)
        for t in transactions:
            when = to_local(t.date)
            if when is None or when < window_start:
                continue
            label = weekday_label(when)
            amounts[label] += t.amount
            counts[label] += 1

        return [
            DailyTotal(day=label, amount=amounts.get(label, 0.0), count=counts.get(label, 0))
            for label in labels
        ]

    @staticmethod
    def weekly_comparison(transactions: Iterable[Transaction], now: datetime) -> WeeklyComparison:
        this_week_start = start_of_week(now)
        last_week_start = this_week_start - timedelta(days=7)

        this_week = 0.0
        last_week = 0.0
        for t in transactions:
            when = to_local(t.date)
            if t.type != TransactionType.EXPENSE or when is None:
                continue
            if when >= this_week_start:
                this_week += t.amount
            elif when >= last_week_start:
                last_week += t.amount

        change = this_week - last_week
        change_percent = (change / last_week) * 100 if last_week > 0 else 0.0
        return WeeklyComparison(
            this_week=this_week,
            last_week=last_week,
            change=change,
            change_percent=change_percent,
        )

    def calculate(
        self,
        transactions: Sequence[Transaction],
        now: Optional[datetime] = None,
    ) -> AnalyticsData:
        now = to_local(now) if now is not None else datetime.now()
        transactions = list(transactions)

        total_income, total_expenses = self.totals(transactions)
        count = len(transactions)
        average = (total_income + total_expenses) / count if count > 0 else 0.0

        breakdown = self.category_breakdown(transactions)
        most_used = (
            CategoryUsage(category=breakdown[0].category, count=breakdown[0].count)
            if breakdown
            else None
        )

        undated = sum(1 for t in transactions if t.date is None)
        logger.debug(
            f"Calculating analytics for {count} transactions "
            f"({undated} without date) as of {now.isoformat()}"
        )

        return AnalyticsData(
            total_income=total_income,
            total_expenses=total_expenses,
            net_change=total_income - total_expenses,
            transaction_count=count,
            average_transaction=average,
            largest_transaction=self.largest_transaction(transactions),
            most_used_category=most_used,
            category_breakdown=breakdown,
            monthly_trend=self.monthly_trend(transactions),
            daily_pattern=self.daily_pattern(transactions, now),
            weekly_comparison=self.weekly_comparison(transactions, now),
        )


def calculate_analytics(
    transactions: Sequence[Transaction],
    now: Optional[datetime] = None,
) -> AnalyticsData:
    """Module-level shortcut using the default six-month trend window."""
    return TransactionAnalyzer().calculate(transactions, now)
