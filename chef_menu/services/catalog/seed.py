"""Start-up population of the catalog from a YAML file."""
import logging
from pathlib import Path
from typing import Union

import yaml

from chef_menu.services.catalog.catalog import MenuCatalog
from chef_menu.services.catalog.validator import MenuValidationError

logger = logging.getLogger(__name__)


def _as_text(value) -> str:
    return "" if value is None else str(value)


def load_seed_file(catalog: MenuCatalog, seed_file: Union[str, Path]) -> int:
    """
    Add the dishes listed in a YAML seed file to the catalog.

    Each entry goes through the catalog's validated add, so a rejected entry
    is logged and skipped rather than stored.

    Args:
        catalog: Catalog to populate
        seed_file: Path to a YAML file with an ``items`` list

    Returns:
        Number of dishes added
    """
    seed_path = Path(seed_file)
    with open(seed_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Seed file {seed_path} must contain a mapping")

    items = data.get("items", [])
    if not isinstance(items, list):
        raise ValueError(f"Seed file {seed_path} must list its dishes under 'items'")

    added = 0
    for index, entry in enumerate(items):
        if not isinstance(entry, dict):
            raise ValueError(f"Seed file {seed_path} entry {index} must be a mapping")
        try:
            catalog.add(
                dish_name=_as_text(entry.get("dish_name")),
                description=_as_text(entry.get("description")),
                course=_as_text(entry.get("course")),
                price_text=_as_text(entry.get("price")),
                image_url=entry.get("image_url"),
            )
        except MenuValidationError as e:
            logger.warning(f"[SEED] Skipping entry {index} in {seed_path} - {e.message}")
            continue
        added += 1

    logger.info(f"[SEED] Loaded {added} items from {seed_path}")
    return added
