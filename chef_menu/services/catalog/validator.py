"""Menu item validation."""
import math
from enum import Enum
from typing import Optional

from chef_menu.services.catalog.models import Course


class ValidationErrorKind(str, Enum):
    """Which validation rule rejected a candidate item."""

    MISSING_FIELDS = "missing_fields"
    INVALID_PRICE = "invalid_price"
    INVALID_COURSE = "invalid_course"


_MESSAGES = {
    ValidationErrorKind.MISSING_FIELDS: "Please fill in all fields",
    ValidationErrorKind.INVALID_PRICE: "Please enter a valid price",
    ValidationErrorKind.INVALID_COURSE: "Please choose a valid course",
}


class MenuValidationError(Exception):
    """Raised when a candidate menu item is rejected."""

    def __init__(self, kind: ValidationErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or _MESSAGES[kind]
        super().__init__(self.message)


def parse_price(price_text: str) -> Optional[float]:
    """
    Parse price text into a positive finite number.

    Returns:
        The price, or None if the text is not a valid positive number
    """
    try:
        value = float(price_text.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse_course(course: str) -> Optional[Course]:
    """Resolve course text to a Course, ignoring case and surrounding whitespace."""
    try:
        return Course(course.strip().lower())
    except (AttributeError, ValueError):
        return None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def validate_menu_item(
    dish_name: Optional[str],
    description: Optional[str],
    course: Optional[str],
    price_text: Optional[str],
) -> Optional[MenuValidationError]:
    """
    Check candidate fields before they may enter the catalog.

    Rules are checked in order and the first failure wins: every field must
    be filled in, then the price must be a positive number, then the course
    must be a known one.

    Returns:
        The validation error, or None if the candidate is acceptable
    """
    if any(_is_blank(value) for value in (dish_name, description, course, price_text)):
        return MenuValidationError(ValidationErrorKind.MISSING_FIELDS)

    if parse_price(price_text) is None:
        return MenuValidationError(ValidationErrorKind.INVALID_PRICE)

    if parse_course(course) is None:
        return MenuValidationError(ValidationErrorKind.INVALID_COURSE)

    return None
