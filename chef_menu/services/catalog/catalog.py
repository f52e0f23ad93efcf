"""In-memory menu catalog."""
import logging
import threading
from typing import Callable, List, Optional, Tuple

from chef_menu.services.catalog.constants import DEFAULT_IMAGES
from chef_menu.services.catalog.ids import generate_item_id
from chef_menu.services.catalog.models import MenuItem
from chef_menu.services.catalog.validator import (
    parse_course,
    parse_price,
    validate_menu_item,
)

logger = logging.getLogger(__name__)


class MenuCatalog:
    """
    Ordered collection of menu items.

    Items keep insertion order, which is the default display order. Items
    only enter through add() and only leave through remove(); readers get
    immutable snapshots.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_item_id):
        self._id_factory = id_factory
        self._items: List[MenuItem] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def add(
        self,
        dish_name: str,
        description: str,
        course: str,
        price_text: str,
        image_url: Optional[str] = None,
    ) -> MenuItem:
        """
        Validate a candidate dish and append it to the catalog.

        Raises:
            MenuValidationError: if the candidate is rejected; the catalog is unchanged
        """
        error = validate_menu_item(dish_name, description, course, price_text)
        if error is not None:
            logger.info(f"[CATALOG] Rejected item - {error.kind.value}: {error.message}")
            raise error

        resolved_course = parse_course(course)
        if image_url is None or not image_url.strip():
            image_url = DEFAULT_IMAGES[resolved_course]

        with self._lock:
            item = MenuItem(
                id=self._new_id(),
                dish_name=dish_name.strip(),
                description=description.strip(),
                course=resolved_course,
                price=parse_price(price_text),
                image_url=image_url.strip(),
            )
            self._items = self._items + [item]

        logger.info(
            f"[CATALOG] Added item - id: {item.id}, name: {item.dish_name}, "
            f"course: {item.course.value}, price: {item.display_price}"
        )
        return item

    def remove(self, item_id: str) -> bool:
        """
        Remove the item with the given id.

        Returns:
            True if an item was removed, False if no item had that id
        """
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            removed = len(remaining) != len(self._items)
            if removed:
                self._items = remaining

        if removed:
            logger.info(f"[CATALOG] Removed item - id: {item_id}")
        else:
            logger.debug(f"[CATALOG] Remove ignored, no item with id: {item_id}")
        return removed

    def get(self, item_id: str) -> Optional[MenuItem]:
        """Get an item by id."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def snapshot(self) -> Tuple[MenuItem, ...]:
        """Get the current items in insertion order."""
        return tuple(self._items)

    def _new_id(self) -> str:
        # Caller holds the lock
        existing = {item.id for item in self._items}
        item_id = self._id_factory()
        while item_id in existing:
            item_id = self._id_factory()
        return item_id
