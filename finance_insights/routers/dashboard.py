import logging

from fastapi import APIRouter, HTTPException

from finance_insights.core.config import settings
from finance_insights.models.analytics import DashboardRequest, DashboardStats
from finance_insights.utils.dashboard import build_dashboard_stats

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=DashboardStats)
def dashboard(request: DashboardRequest) -> DashboardStats:
    logger.info(
        f"Building dashboard for {len(request.balances)} balances "
        f"and {len(request.transactions)} transactions"
    )
    try:
        return build_dashboard_stats(
            request.balances,
            request.transactions,
            now=request.now,
            recent_limit=settings.RECENT_TRANSACTIONS_LIMIT,
        )
    except Exception as e:
        logger.error(f"Error building dashboard: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error building dashboard: {str(e)}")
