"""Read-only guest menu endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from chef_menu.core.config import settings
from chef_menu.core.dependencies import get_menu_catalog
from chef_menu.services.catalog.catalog import MenuCatalog
from chef_menu.services.catalog.constants import COURSE_COLORS, FALLBACK_COURSE_COLOR
from chef_menu.services.catalog.filters import filter_by_course, section_title
from chef_menu.services.catalog.models import CourseFilter, MenuItem


router = APIRouter()
logger = logging.getLogger(__name__)


class GuestMenuItem(BaseModel):
    """A dish as shown to guests."""
    item: MenuItem
    color: str


class GuestMenuResponse(BaseModel):
    """Guest menu response model."""
    restaurant_name: str
    course: CourseFilter
    title: str
    count: int
    items: List[GuestMenuItem]


@router.get("/api/guest/menu", response_model=GuestMenuResponse)
async def get_guest_menu(
    request: Request,
    course: CourseFilter = CourseFilter.ALL,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    """Browse dishes, optionally narrowed to one course."""
    logger.info(
        f"[GUEST] Menu requested - course: {course.value}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    items = filter_by_course(catalog.snapshot(), course)
    return GuestMenuResponse(
        restaurant_name=settings.restaurant_name,
        course=course,
        title=section_title(course),
        count=len(items),
        items=[
            GuestMenuItem(
                item=item,
                color=COURSE_COLORS.get(item.course, FALLBACK_COURSE_COLOR),
            )
            for item in items
        ],
    )
