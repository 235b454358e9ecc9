from fastapi import APIRouter, Depends

from ...api.deps import get_report_service
from ...schemas.stats import DetailedStats, StatsSummary
from ...services.report_service import ReportService

router = APIRouter(prefix="/stats", tags=["Statistics"])

@router.get("", response_model=StatsSummary)
async def stats(service: ReportService = Depends(get_report_service)):
    """Total patients, doctors and appointments."""
    return service.summary()

@router.get("/detailed", response_model=DetailedStats)
async def detailed_stats(service: ReportService = Depends(get_report_service)):
    """Dashboard statistics: totals, today's count, status breakdown and the last 7 days."""
    return service.detailed()
