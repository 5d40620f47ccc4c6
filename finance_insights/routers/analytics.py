import logging
from typing import List

from fastapi import APIRouter, HTTPException

from finance_insights.core.config import settings
from finance_insights.models.analytics import (
    AnalyticsData,
    AnalyticsRequest,
    AnalyticsResponse,
    Insight,
)
from finance_insights.utils.analyzer import TransactionAnalyzer
from finance_insights.utils.insights import build_insights

router = APIRouter()
logger = logging.getLogger(__name__)
analyzer = TransactionAnalyzer(trend_months=settings.MONTHLY_TREND_MONTHS)


@router.post("", response_model=AnalyticsResponse)
def calculate(request: AnalyticsRequest) -> AnalyticsResponse:
    """
    Compute totals, breakdowns, trends and insights for the posted transactions.
    The currency of the first transaction that carries a balance is used for
    display, falling back to the configured default.
    """
    logger.info(f"Calculating analytics for {len(request.transactions)} transactions")

    currency = next(
        (t.balance.currency for t in request.transactions if t.balance is not None),
        settings.DEFAULT_CURRENCY,
    )

    try:
        analytics = analyzer.calculate(request.transactions, request.now)
        insights = build_insights(analytics, currency)
    except Exception as e:
        logger.error(f"Error calculating analytics: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error calculating analytics: {str(e)}")

    return AnalyticsResponse(analytics=analytics, insights=insights, currency=currency)


@router.post("/insights", response_model=List[Insight])
def insights(analytics: AnalyticsData, currency: str = settings.DEFAULT_CURRENCY) -> List[Insight]:
    """Turn an already computed analytics snapshot into insight messages."""
    try:
        return build_insights(analytics, currency)
    except Exception as e:
        logger.error(f"Error building insights: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error building insights: {str(e)}")
