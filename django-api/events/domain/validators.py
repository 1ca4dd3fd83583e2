"""Field predicates shared by the event and booking write pipelines."""

import re
from typing import Any

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]{2,}", re.IGNORECASE)


def is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_non_empty_text_sequence(value: Any) -> bool:
    """True for a non-empty list or tuple whose items are all non-empty text."""
    if not isinstance(value, (list, tuple)) or not value:
        return False
    return all(is_non_empty_text(item) for item in value)


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def normalize_email(value: str) -> str:
    return value.strip().lower()
