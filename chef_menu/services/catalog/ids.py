"""Menu item identifier generation."""
import secrets
import string
import time

_ID_ALPHABET = string.ascii_lowercase + string.digits
_RANDOM_PART_LENGTH = 9


def generate_item_id() -> str:
    """
    Generate an identifier for a new menu item.

    Combines the current time in milliseconds with a random suffix so two
    calls within the same millisecond still differ.

    Returns:
        Identifier of the form ``item_<millis>_<random>``
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_RANDOM_PART_LENGTH))
    return f"item_{millis}_{suffix}"
