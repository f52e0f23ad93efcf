"""Static lookup tables for courses."""
from chef_menu.services.catalog.models import Course, CourseFilter

# Used when a dish is added without its own image
DEFAULT_IMAGES = {
    Course.STARTER: "https://images.unsplash.com/photo-1504674900247-0877df9cc836?w=400",
    Course.MAIN: "https://images.unsplash.com/photo-1565299624946-b28f40a0ca4b?w=400",
    Course.DESSERT: "https://images.unsplash.com/photo-1563729785271-4c4eac99737f?w=400",
}

COURSE_FILTER_LABELS = {
    CourseFilter.ALL: "All Courses",
    CourseFilter.STARTER: "Starters",
    CourseFilter.MAIN: "Main Courses",
    CourseFilter.DESSERT: "Desserts",
}

COURSE_COLORS = {
    Course.STARTER: "#FF6B6B",
    Course.MAIN: "#4ECDC4",
    Course.DESSERT: "#FFD166",
}

FALLBACK_COURSE_COLOR = "#8B4513"

COMPLETE_MENU_TITLE = "Complete Menu"
