"""Analytics endpoints for alumni."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from mentorconnect.application.use_cases.pages import (
    ANALYTICS_ERROR,
    AnalyticsPage,
    PageRegistry,
)
from mentorconnect.domain.entities import AnalyticsReport, Role, User
from mentorconnect.interfaces.api.dependencies import get_current_user, get_page_registry
from mentorconnect.interfaces.api.routes_helpers import page_key, require_page, require_role
from mentorconnect.interfaces.api.schemas import PageRead

router = APIRouter(prefix="/analytics", tags=["analytics"])
logger = logging.getLogger(__name__)


@router.get("", response_model=PageRead[AnalyticsReport])
async def read_analytics(
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> PageRead[AnalyticsReport]:
    """Return the mentorship, resource and event analytics."""

    require_role(current_user, Role.ALUMNI)
    page = await pages.load(
        page_key("analytics", current_user),
        AnalyticsPage.from_fixtures,
        error_message=ANALYTICS_ERROR,
    )
    if not page.ok:
        return PageRead[AnalyticsReport](error=page.error)
    return PageRead[AnalyticsReport](data=page.data.report)


@router.get("/export")
async def export_analytics(
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> Response:
    """Download the report as an Excel workbook with one sheet per tab."""

    require_role(current_user, Role.ALUMNI)
    page = await require_page(
        pages,
        page_key("analytics", current_user),
        AnalyticsPage.from_fixtures,
        error_message=ANALYTICS_ERROR,
    )
    export = page.export()
    logger.info("Exported analytics report %s", export.filename)
    return Response(
        content=export.content,
        media_type=export.content_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


__all__ = ["router"]
