"""Menu catalog models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Course(str, Enum):
    """Course a dish is served in."""

    STARTER = "starter"
    MAIN = "main"
    DESSERT = "dessert"


class CourseFilter(str, Enum):
    """Course selector for menu views. ALL is never stored on an item."""

    ALL = "all"
    STARTER = "starter"
    MAIN = "main"
    DESSERT = "dessert"


class MenuItem(BaseModel):
    """A single dish in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    dish_name: str
    description: str
    course: Course
    price: float = Field(..., gt=0)
    image_url: Optional[str] = None

    @computed_field
    @property
    def display_price(self) -> str:
        """Price formatted to two decimals."""
        return f"{self.price:.2f}"


class MenuSummary(BaseModel):
    """Aggregate pricing figures for the chef dashboard."""

    total_items: int
    overall_average: float
    average_by_course: dict[Course, float]
