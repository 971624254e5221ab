"""
Compliance statistics route
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_compliance_stats_use_case
from ..models import ComplianceStatsResponse
from ..services.use_cases import ComplianceStatsUseCase

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/compliance", response_model=ComplianceStatsResponse)
async def compliance_stats(use_case: ComplianceStatsUseCase = Depends(get_compliance_stats_use_case)):
    stats = await use_case.execute(None)
    return ComplianceStatsResponse(
        total_videos=stats.total_videos,
        passed=stats.passed,
        review=stats.review,
        failed=stats.failed,
        pass_rate=stats.pass_rate,
        average_duration_seconds=stats.average_duration_seconds,
    )
