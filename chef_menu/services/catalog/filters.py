"""Course-filtered menu views."""
from typing import Sequence, Tuple

from chef_menu.services.catalog.constants import COMPLETE_MENU_TITLE, COURSE_FILTER_LABELS
from chef_menu.services.catalog.models import CourseFilter, MenuItem


def filter_by_course(
    snapshot: Sequence[MenuItem], selector: CourseFilter
) -> Tuple[MenuItem, ...]:
    """
    Items matching the selected course, in their original order.

    CourseFilter.ALL returns the snapshot unchanged.
    """
    selector = CourseFilter(selector)
    if selector == CourseFilter.ALL:
        return tuple(snapshot)
    return tuple(item for item in snapshot if item.course.value == selector.value)


def section_title(selector: CourseFilter) -> str:
    """Heading shown above a filtered menu."""
    selector = CourseFilter(selector)
    if selector == CourseFilter.ALL:
        return COMPLETE_MENU_TITLE
    return COURSE_FILTER_LABELS[selector]
