from collections import Counter
from datetime import datetime
from typing import List, Optional, Sequence

from finance_insights.models.analytics import DashboardStats
from finance_insights.models.transaction import Balance, Transaction
from finance_insights.utils.analyzer import to_local


def distinct_currencies(balances: Sequence[Balance]) -> List[str]:
    seen: List[str] = []
    for balance in balances:
        if balance.currency not in seen:
            seen.append(balance.currency)
    return seen


def this_month_transactions(transactions: Sequence[Transaction], now: datetime) -> List[Transaction]:
    first_of_month = datetime(now.year, now.month, 1)
    return [t for t in transactions if t.date is not None and to_local(t.date) >= first_of_month]


def most_used_category(transactions: Sequence[Transaction]) -> str:
    """
    Name of the category with the most transactions. "Uncategorized" only
    wins when nothing else has been used.
    """
    ranked = Counter(t.category_name for t in transactions).most_common()
    if not ranked:
        return "None"
    if ranked[0][0] == "Uncategorized" and len(ranked) > 1:
        return ranked[1][0]
    return ranked[0][0]


def recent_transactions(transactions: Sequence[Transaction], limit: int = 5) -> List[Transaction]:
    dated = sorted(
        (t for t in transactions if t.date is not None),
        key=lambda t: to_local(t.date),
        reverse=True,
    )
    undated = [t for t in transactions if t.date is None]
    return (dated + undated)[:limit]


def build_dashboard_stats(
    balances: Sequence[Balance],
    transactions: Sequence[Transaction],
    now: Optional[datetime] = None,
    recent_limit: int = 5,
) -> DashboardStats:
    now = to_local(now) if now is not None else datetime.now()
    return DashboardStats(
        total_accounts=len(balances),
        total_transactions=len(transactions),
        currencies=distinct_currencies(balances),
        this_month_transactions=len(this_month_transactions(transactions, now)),
        most_used_category=most_used_category(transactions),
        recent_transactions=recent_transactions(transactions, recent_limit),
    )
