from typing import Dict, List

from finance_insights.models.analytics import AnalyticsData, Insight, InsightKind

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "CNY": "CN¥",
    "KRW": "₩",
    "CAD": "CA$",
    "AUD": "A$",
    "MXN": "MX$",
    "BRL": "R$",
}

ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW"}


def format_currency(amount: float, currency: str = "USD") -> str:
    """
    Format an amount the way an English-locale currency formatter does,
    e.g. ``format_currency(1234.5)`` -> ``"$1,234.50"``.
    Unknown codes are written as a prefix: ``"CHF 12.00"``.
    """
    code = (currency or "USD").upper()
    decimals = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    number = f"{abs(amount):,.{decimals}f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    text = f"{symbol}{number}" if symbol else f"{code} {number}"
    # avoid "-$0.00" for values that round to zero
    if amount < 0 and float(number.replace(",", "")) != 0:
        return f"-{text}"
    return text


def get_insight_messages(analytics: AnalyticsData, currency: str = "USD") -> List[str]:
    insights: List[str] = []

    if analytics.category_breakdown and analytics.total_expenses > 0:
        top = analytics.category_breakdown[0]
        percentage = top.amount / analytics.total_expenses * 100
        insights.append(f"{top.category} accounts for {percentage:.1f}% of your expenses")

    change_percent = analytics.weekly_comparison.change_percent
    if change_percent != 0:
        direction = "increased" if change_percent > 0 else "decreased"
        insights.append(f"Your spending {direction} by {abs(change_percent):.1f}% this week")

    if analytics.net_change > 0:
        insights.append(f"You saved {format_currency(analytics.net_change, currency)} this period")
    elif analytics.net_change < 0:
        insights.append(
            f"You spent {format_currency(abs(analytics.net_change), currency)} more than you earned"
        )

    return insights


def classify_insight(message: str) -> InsightKind:
    """Spending going up is a warning, going down or saving is a success."""
    if "increased" in message or "spent" in message:
        return InsightKind.WARNING
    if "decreased" in message or "saved" in message:
        return InsightKind.SUCCESS
    return InsightKind.INFO


def build_insights(analytics: AnalyticsData, currency: str = "USD") -> List[Insight]:
    return [
        Insight(message=message, kind=classify_insight(message))
        for message in get_insight_messages(analytics, currency)
    ]
